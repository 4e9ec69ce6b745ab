"""
Summary: Resolve user-supplied paths into a flat, bounded list of regular files.
Why: Let a single launch request name directories without risking runaway walks.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from itertools import islice
from logging import Logger, getLogger
from pathlib import Path

from vimtab.features.batch import FileBatch
from vimtab.shared.limits import MAX_FILES_PER_LEVEL, MAX_VISITED_ENTRIES

from ..domain.budget import ExpansionBudget


class PathExpander:
    """Expand files and directories depth-first under per-level and global caps."""

    _per_level: int
    _ceiling: int
    _logger: Logger

    def __init__(
        self,
        *,
        per_level: int = MAX_FILES_PER_LEVEL,
        ceiling: int = MAX_VISITED_ENTRIES,
        logger: Logger | None = None,
    ) -> None:
        self._per_level = per_level
        self._ceiling = ceiling
        self._logger = logger or getLogger(__name__)

    def expand_all(self, paths: Iterable[str | Path]) -> FileBatch:
        """Expand the top-level arguments into one ordered batch.

        Only the first ``per_level`` arguments are considered. One budget is
        shared across the whole call, so the ceiling bounds the total work.

        Raises:
            DirectoryStructureTooLarge: When the walk visits too many entries.
        """
        budget = ExpansionBudget(ceiling=self._ceiling)
        files: list[Path] = []
        for item in islice(paths, self._per_level):
            files.extend(self.expand(Path(item), budget))
        self._logger.debug(
            "Expanded %d file(s) after visiting %d entries", len(files), budget.visited
        )
        return FileBatch.of(files)

    def expand(self, path: Path, budget: ExpansionBudget) -> list[Path]:
        """Expand ``path`` into regular files, charging visits to ``budget``.

        A regular file (symlinks followed) yields itself. A path that cannot be
        statted or listed as a directory yields nothing. Otherwise the first
        ``per_level`` entries are each charged to the budget and expanded in
        turn; a listing that fails part way keeps the entries read so far.
        """
        try:
            is_file = path.is_file()
        except OSError as e:
            self._logger.debug("Skipping unreadable path %s: %s", path, e)
            return []
        if is_file:
            budget.record_visit()
            return [path]

        try:
            scanner = os.scandir(path)
        except OSError as e:
            self._logger.debug("Skipping unreadable path %s: %s", path, e)
            return []

        result: list[Path] = []
        with scanner:
            entries = islice(scanner, self._per_level)
            while True:
                try:
                    entry = next(entries)
                except StopIteration:
                    break
                except OSError as e:
                    self._logger.debug("Stopped listing %s: %s", path, e)
                    break
                budget.record_visit()
                budget.check()
                result.extend(self.expand(Path(entry.path), budget))
        return result


__all__ = ["PathExpander"]
