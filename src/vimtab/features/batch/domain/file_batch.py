"""Ordered, immutable list of files resolved for one launch request."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class FileBatch:
    """Files in the order they will be opened."""

    files: tuple[Path, ...] = ()

    @classmethod
    def of(cls, files: Iterable[Path]) -> "FileBatch":
        return cls(files=tuple(files))

    def __iter__(self) -> Iterator[Path]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def __bool__(self) -> bool:
        return bool(self.files)


__all__ = ["FileBatch"]
