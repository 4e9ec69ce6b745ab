"""
Summary: Export the file batch record and aggregate size guard.
Why: Provide a stable import surface for the expander and launch service.
"""

from .domain.file_batch import FileBatch
from .usecases.size_guard import exceeds_limit, total_size

__all__ = ["FileBatch", "exceeds_limit", "total_size"]
