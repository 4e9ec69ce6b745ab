"""
Summary: Export per-file dispatch errors and the dispatcher use case.
Why: Provide a stable import surface for the launch service and tests.
"""

from .domain.errors import CommandSpawnError, DispatchError, ItemPathNotExist
from .usecases.dispatcher import Dispatcher

__all__ = [
    "CommandSpawnError",
    "DispatchError",
    "Dispatcher",
    "ItemPathNotExist",
]
