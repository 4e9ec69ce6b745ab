"""
Summary: Shared visit counter bounding one recursive expansion.
Why: Catch deep or wide trees that the per-directory cap alone would miss.
"""

from __future__ import annotations

from dataclasses import dataclass

from vimtab.shared.errors import LaunchAborted
from vimtab.shared.limits import MAX_VISITED_ENTRIES


class DirectoryStructureTooLarge(LaunchAborted):
    """Raised when an expansion visits more entries than its budget allows."""

    def __init__(self, visited: int, ceiling: int) -> None:
        self.visited = visited
        self.ceiling = ceiling
        super().__init__(
            "It seems you are trying to expand directories with a complicated structure, "
            f"but more than {ceiling} entries is regarded as an error.\n"
            "Please break down the arguments and run this program on a smaller set of paths."
        )


@dataclass(slots=True)
class ExpansionBudget:
    """Count of filesystem entries visited during one expansion call tree."""

    ceiling: int = MAX_VISITED_ENTRIES
    visited: int = 0

    @property
    def exceeded(self) -> bool:
        return self.visited > self.ceiling

    def record_visit(self) -> None:
        """Count one visited entry; the count is never decremented."""

        self.visited += 1

    def check(self) -> None:
        """Raise ``DirectoryStructureTooLarge`` once the ceiling is crossed."""

        if self.exceeded:
            raise DirectoryStructureTooLarge(self.visited, self.ceiling)


__all__ = ["DirectoryStructureTooLarge", "ExpansionBudget"]
