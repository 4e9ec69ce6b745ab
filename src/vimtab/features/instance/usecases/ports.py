"""
Summary: Ports for process discovery and process creation.
Why: Keep probe caching and dispatch decisions testable without real processes.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from ..domain.models import ProcessInfo


@runtime_checkable
class ProcessTable(Protocol):
    """Read-only view of the operating system's process table."""

    def find_by_names(self, names: Iterable[str]) -> ProcessInfo | None:
        """Return the first live process whose name is in ``names``.

        Raises:
            ProcessTableUnavailable: When the table cannot be read at all.
        """
        ...


@runtime_checkable
class ProcessSpawner(Protocol):
    """Start a detached process without waiting for it."""

    def spawn(self, argv: Sequence[str]) -> None:
        """Spawn ``argv``; raises ``OSError`` when the OS refuses."""
        ...


__all__ = ["ProcessSpawner", "ProcessTable"]
