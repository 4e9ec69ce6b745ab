"""
Summary: Detect a running editor and wait for its remote server to warm up.
Why: A freshly started editor is listed before it accepts remote commands.
"""

from __future__ import annotations

import time
from logging import Logger, getLogger
from pathlib import PurePath
from typing import Callable

from vimtab.shared.limits import WARM_UP_MILLIS

from ..domain.models import ProbeState, ProcessInfo
from .ports import ProcessTable

_WINDOWS_SUFFIX = ".exe"


def editor_process_names(executable: str) -> tuple[str, str]:
    """Return the process names an ``executable`` may show up under.

    >>> editor_process_names("gvim")
    ('gvim', 'gvim.exe')
    """
    name = PurePath(executable).name or executable
    if name.lower().endswith(_WINDOWS_SUFFIX):
        name = name[: -len(_WINDOWS_SUFFIX)]
    return (name, name + _WINDOWS_SUFFIX)


class InstanceProbe:
    """Query the process table once for a running editor instance.

    When the matched process is younger than the warm-up interval, ``probe``
    sleeps for the remainder before reporting it as found. There is no direct
    readiness signal from the editor, so the age of the process stands in
    for one.
    """

    _table: ProcessTable
    _names: tuple[str, ...]
    _warm_up_ms: int
    _clock: Callable[[], float]
    _sleep: Callable[[float], None]
    _logger: Logger

    def __init__(
        self,
        table: ProcessTable,
        *,
        executable: str,
        warm_up_ms: int = WARM_UP_MILLIS,
        clock: Callable[[], float] = time.time,
        sleep: Callable[[float], None] = time.sleep,
        logger: Logger | None = None,
    ) -> None:
        self._table = table
        self._names = editor_process_names(executable)
        self._warm_up_ms = warm_up_ms
        self._clock = clock
        self._sleep = sleep
        self._logger = logger or getLogger(__name__)

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def probe(self) -> ProbeState:
        """Return ``INSTANCE_FOUND`` or ``INSTANCE_NOT_FOUND``, never ``NEVER_CHECKED``."""

        process = self._table.find_by_names(self._names)
        if process is None:
            self._logger.debug(
                "No running editor found",
                extra={"launch_event": "launch.probe.missing"},
            )
            return ProbeState.INSTANCE_NOT_FOUND

        wait_ms = self.remaining_warm_up_ms(process)
        if wait_ms > 0:
            self._logger.debug(
                "Waiting %.0f ms for editor warm-up",
                wait_ms,
                extra={"launch_event": "launch.probe.wait", "wait_ms": wait_ms},
            )
            self._sleep(wait_ms / 1000)

        self._logger.debug(
            "Reusing running editor pid=%d",
            process.pid,
            extra={"launch_event": "launch.probe.found", "pid": process.pid},
        )
        return ProbeState.INSTANCE_FOUND

    def remaining_warm_up_ms(self, process: ProcessInfo) -> float:
        """Milliseconds left before ``process`` is assumed ready; 0 when unknown."""

        if process.create_time is None:
            return 0.0
        run_ms = max(0.0, (self._clock() - process.create_time) * 1000)
        return max(0.0, self._warm_up_ms - run_ms)


__all__ = ["InstanceProbe", "editor_process_names"]
