"""Command line argument options."""

from dataclasses import dataclass, field
from typing import final


@final
@dataclass(slots=True)
class LaunchArgs:
    """Paths to open plus output verbosity."""

    paths: list[str] = field(default_factory=list)
    verbose: bool = False
    quiet: bool = False


__all__ = ["LaunchArgs"]
