"""Per-file failures; each one skips its file without ending the run."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class DispatchError(Exception):
    """Base class for failures opening a single file."""

    path: Path

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class ItemPathNotExist(DispatchError):
    """The path vanished between expansion and dispatch."""

    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Path: {str(path)!r} doesn't exist.")


class CommandSpawnError(DispatchError):
    """The OS refused to create the editor or remote-command process."""

    argv: tuple[str, ...]
    cause: OSError

    def __init__(self, path: Path, argv: Sequence[str], cause: OSError) -> None:
        self.argv = tuple(argv)
        self.cause = cause
        super().__init__(path, f"Failed to run {self.argv[0]!r}: {cause}")


__all__ = ["CommandSpawnError", "DispatchError", "ItemPathNotExist"]
