"""Use case wiring expansion, size checks, probing and dispatch for one request."""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from logging import Logger, getLogger
from pathlib import Path

from vimtab.config.settings import EDITOR_EXECUTABLE, SERVER_NAME
from vimtab.features.batch import FileBatch, exceeds_limit, total_size
from vimtab.features.dispatch import DispatchError, Dispatcher
from vimtab.features.expansion import PathExpander
from vimtab.features.instance import (
    InstanceProbe,
    ProbeState,
    ProcessSpawner,
    ProcessTable,
    PsutilProcessTable,
    SubprocessSpawner,
)
from vimtab.shared.errors import LaunchAborted
from vimtab.shared.limits import MAX_ARGS, MAX_TOTAL_BYTES


class EditorNotInstalled(LaunchAborted):
    """The editor executable is not on the search path."""

    def __init__(self, executable: str) -> None:
        super().__init__(
            f"It seems you don't have the {executable} executable. "
            "To begin with, please install it."
        )


class NothingToOpen(LaunchAborted):
    """No path arguments were given."""

    def __init__(self) -> None:
        super().__init__("No paths given; nothing to open.")


class TooManyArguments(LaunchAborted):
    """More path arguments than a single request accepts."""

    def __init__(self, count: int, limit: int) -> None:
        super().__init__(f"Too many arguments: {count} given, at most {limit} accepted.")


class BatchTooLarge(LaunchAborted):
    """The resolved files are too large to open in one go."""

    def __init__(self, size: int, limit: int) -> None:
        super().__init__(
            f"Total size of the files ({size} bytes) exceeds the limit of {limit} bytes."
        )


@dataclass(slots=True)
class LaunchRequest:
    """Raw path arguments of one invocation."""

    paths: Sequence[str]


@dataclass(slots=True, frozen=True)
class LaunchFailure:
    """A file that could not be handed to the editor."""

    path: Path
    message: str


@dataclass(slots=True)
class LaunchReport:
    """Outcome of a completed run; fatal failures raise instead."""

    files: FileBatch
    opened: int = 0
    probe_state: ProbeState = ProbeState.NEVER_CHECKED
    failures: list[LaunchFailure] = field(default_factory=list)


class LaunchService:
    """Run expand → size check → probe → dispatch for a launch request."""

    _executable: str
    _server_name: str
    _process_table: ProcessTable
    _spawner: ProcessSpawner
    _expander: PathExpander
    _locate_executable: Callable[[str], str | None]
    _sleep: Callable[[float], None]
    _max_args: int
    _size_limit: int
    _logger: Logger

    def __init__(
        self,
        *,
        executable: str = EDITOR_EXECUTABLE,
        server_name: str = SERVER_NAME,
        process_table: ProcessTable | None = None,
        spawner: ProcessSpawner | None = None,
        expander: PathExpander | None = None,
        locate_executable: Callable[[str], str | None] | None = None,
        sleep: Callable[[float], None] = time.sleep,
        max_args: int = MAX_ARGS,
        size_limit: int = MAX_TOTAL_BYTES,
        logger: Logger | None = None,
    ) -> None:
        self._executable = executable
        self._server_name = server_name
        self._process_table = process_table or PsutilProcessTable()
        self._spawner = spawner or SubprocessSpawner()
        self._expander = expander or PathExpander()
        self._locate_executable = locate_executable or shutil.which
        self._sleep = sleep
        self._max_args = max_args
        self._size_limit = size_limit
        self._logger = logger or getLogger(__name__)

    def check_preconditions(self, request: LaunchRequest) -> None:
        """Reject the request before any path is read.

        Raises:
            EditorNotInstalled: The editor cannot be found on PATH.
            NothingToOpen: ``request.paths`` is empty.
            TooManyArguments: More than ``max_args`` paths were given.
        """
        if self._locate_executable(self._executable) is None:
            raise EditorNotInstalled(self._executable)
        if not request.paths:
            raise NothingToOpen()
        if len(request.paths) > self._max_args:
            raise TooManyArguments(len(request.paths), self._max_args)

    def build_batch(self, request: LaunchRequest) -> FileBatch:
        """Expand the request and enforce the aggregate size limit.

        Raises:
            DirectoryStructureTooLarge: The walk visited too many entries.
            BatchTooLarge: The resolved files are over the size limit.
        """
        batch = self._expander.expand_all(request.paths)
        if exceeds_limit(batch, self._size_limit):
            raise BatchTooLarge(total_size(batch), self._size_limit)
        return batch

    def build_dispatcher(self) -> Dispatcher:
        """Create a dispatcher with fresh per-run probe state."""

        probe = InstanceProbe(
            self._process_table,
            executable=self._executable,
            sleep=self._sleep,
        )
        return Dispatcher(
            probe=probe,
            spawner=self._spawner,
            executable=self._executable,
            server_name=self._server_name,
        )

    def run(self, request: LaunchRequest) -> LaunchReport:
        """Open every file of ``request``; per-file failures are logged and skipped."""

        self.check_preconditions(request)
        batch = self.build_batch(request)
        dispatcher = self.build_dispatcher()
        report = LaunchReport(files=batch)

        total_files = len(batch)
        for sequence, path in enumerate(batch, start=1):
            try:
                dispatcher.open(path, sequence=sequence, total_files=total_files)
            except DispatchError as exc:
                self._logger.error(
                    "%s",
                    exc,
                    extra={
                        "launch_event": "launch.file.error",
                        "path": str(path),
                        "sequence": sequence,
                        "total_files": total_files,
                        "error_message": str(exc),
                    },
                )
                report.failures.append(LaunchFailure(path=path, message=str(exc)))

        report.opened = dispatcher.launch_count
        report.probe_state = dispatcher.state
        self._logger.info(
            "Opened %d/%d file(s)",
            report.opened,
            total_files,
            extra={
                "launch_event": "launch.batch.summary",
                "opened": report.opened,
                "total_files": total_files,
                "failed": len(report.failures),
            },
        )
        return report


__all__ = [
    "BatchTooLarge",
    "EditorNotInstalled",
    "LaunchAborted",
    "LaunchFailure",
    "LaunchReport",
    "LaunchRequest",
    "LaunchService",
    "NothingToOpen",
    "TooManyArguments",
]
