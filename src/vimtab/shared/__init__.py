"""Shared constants and records used across feature packages."""

from .errors import LaunchAborted
from .limits import (
    MAX_ARGS,
    MAX_FILES_PER_LEVEL,
    MAX_TOTAL_BYTES,
    MAX_VISITED_ENTRIES,
    WARM_UP_MILLIS,
)

__all__ = [
    "LaunchAborted",
    "MAX_ARGS",
    "MAX_FILES_PER_LEVEL",
    "MAX_TOTAL_BYTES",
    "MAX_VISITED_ENTRIES",
    "WARM_UP_MILLIS",
]
