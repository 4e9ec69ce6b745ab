"""
Summary: Fixed safety limits applied to every launch request.
Why: Keep argument, traversal, size and warm-up ceilings in one place.
"""

from __future__ import annotations

from typing import Final

# Raw path arguments accepted on the command line.
MAX_ARGS: Final[int] = 20

# Entries considered per directory level, top-level arguments included.
MAX_FILES_PER_LEVEL: Final[int] = 30

# Entries visited across one whole expansion call tree.
MAX_VISITED_ENTRIES: Final[int] = 100

# Aggregate size of the resolved batch.
MAX_TOTAL_BYTES: Final[int] = 300 * 1024

# Time a fresh editor needs before its remote server accepts commands.
WARM_UP_MILLIS: Final[int] = 2000


__all__ = [
    "MAX_ARGS",
    "MAX_FILES_PER_LEVEL",
    "MAX_VISITED_ENTRIES",
    "MAX_TOTAL_BYTES",
    "WARM_UP_MILLIS",
]
