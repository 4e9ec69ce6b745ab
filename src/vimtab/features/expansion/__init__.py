"""
Summary: Export directory expansion domain and use case symbols.
Why: Provide a stable import surface for the launch service and tests.
"""

from .domain.budget import DirectoryStructureTooLarge, ExpansionBudget
from .usecases.expander import PathExpander

__all__ = [
    "DirectoryStructureTooLarge",
    "ExpansionBudget",
    "PathExpander",
]
