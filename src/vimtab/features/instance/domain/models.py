"""Records describing what the process table says about the editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProbeState(str, Enum):
    """Whether a running editor instance has been observed during this run."""

    NEVER_CHECKED = "never_checked"
    INSTANCE_FOUND = "instance_found"
    INSTANCE_NOT_FOUND = "instance_not_found"


@dataclass(slots=True, frozen=True)
class ProcessInfo:
    """A matched process; ``create_time`` is seconds since the epoch, if known."""

    pid: int
    name: str
    create_time: float | None = None


class ProcessTableUnavailable(RuntimeError):
    """Raised when the process table cannot be queried at all."""


__all__ = ["ProbeState", "ProcessInfo", "ProcessTableUnavailable"]
