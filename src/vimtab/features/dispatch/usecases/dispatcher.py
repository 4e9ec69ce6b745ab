"""
Summary: Open one file at a time, in a fresh editor or as a remote tab.
Why: Reuse a single editor instance across every file of a launch request.
"""

from __future__ import annotations

from logging import Logger, getLogger
from pathlib import Path

from vimtab.features.instance import InstanceProbe, ProbeState, ProcessSpawner

from ..domain.errors import CommandSpawnError, ItemPathNotExist

REMOTE_SERVER_FLAG = "--servername"
REMOTE_TAB_FLAG = "--remote-tab"


class Dispatcher:
    """Hand files to the editor, probing for a running instance on demand.

    The probe runs lazily on the first file. While no instance has been seen
    it runs again before every file, since an editor started earlier in the
    same run may now be up. Once an instance is found the answer is kept for
    the rest of the run.
    """

    _probe: InstanceProbe
    _spawner: ProcessSpawner
    _executable: str
    _server_name: str
    _logger: Logger
    state: ProbeState
    launch_count: int

    def __init__(
        self,
        *,
        probe: InstanceProbe,
        spawner: ProcessSpawner,
        executable: str,
        server_name: str,
        logger: Logger | None = None,
    ) -> None:
        self._probe = probe
        self._spawner = spawner
        self._executable = executable
        self._server_name = server_name
        self._logger = logger or getLogger(__name__)
        self.state = ProbeState.NEVER_CHECKED
        self.launch_count = 0

    def fresh_argv(self, path: Path) -> list[str]:
        return [self._executable, str(path)]

    def remote_argv(self, path: Path) -> list[str]:
        return [
            self._executable,
            REMOTE_SERVER_FLAG,
            self._server_name,
            REMOTE_TAB_FLAG,
            str(path),
        ]

    def open(
        self,
        path: Path,
        *,
        sequence: int | None = None,
        total_files: int | None = None,
    ) -> None:
        """Open ``path`` in the editor.

        Raises:
            ItemPathNotExist: ``path`` no longer exists; nothing is spawned.
            CommandSpawnError: The editor process could not be created.
        """
        if not path.exists():
            raise ItemPathNotExist(path)

        match self.state:
            case ProbeState.NEVER_CHECKED | ProbeState.INSTANCE_NOT_FOUND:
                self.state = self._probe.probe()
            case ProbeState.INSTANCE_FOUND:
                pass

        match self.state:
            case ProbeState.INSTANCE_FOUND:
                argv = self.remote_argv(path)
                event = "launch.file.remote"
            case ProbeState.INSTANCE_NOT_FOUND:
                argv = self.fresh_argv(path)
                event = "launch.file.fresh"
            case ProbeState.NEVER_CHECKED:
                raise AssertionError("instance probe must resolve to found or not found")

        try:
            self._spawner.spawn(argv)
        except OSError as e:
            raise CommandSpawnError(path, argv, e) from e

        self.launch_count += 1
        self._logger.info(
            "%s %s",
            "Opened tab for" if event == "launch.file.remote" else "Started editor with",
            path,
            extra={
                "launch_event": event,
                "path": str(path),
                "sequence": sequence,
                "total_files": total_files,
            },
        )


__all__ = ["Dispatcher", "REMOTE_SERVER_FLAG", "REMOTE_TAB_FLAG"]
