"""Aggregate size check run before any file is handed to the editor."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from vimtab.shared.limits import MAX_TOTAL_BYTES


def total_size(files: Iterable[Path]) -> int:
    """Sum on-disk sizes; files whose metadata cannot be read count as zero."""

    total = 0
    for path in files:
        try:
            total += os.stat(path).st_size
        except OSError:
            continue
    return total


def exceeds_limit(files: Iterable[Path], limit: int = MAX_TOTAL_BYTES) -> bool:
    """Return True when the summed size of ``files`` is strictly above ``limit``."""

    return total_size(files) > limit


__all__ = ["exceeds_limit", "total_size"]
