"""src/vimtab/features/instance/adapters/process_table_adapter.py
What: Adapter implementing ProcessTable on top of psutil.
Why: Keep process-table I/O in adapters while use cases target abstractions."""

from __future__ import annotations

from collections.abc import Iterable

import psutil

from ..domain.models import ProcessInfo, ProcessTableUnavailable
from ..usecases.ports import ProcessTable

_ATTRS = ["pid", "name", "create_time"]


class PsutilProcessTable(ProcessTable):
    """Scan live processes with ``psutil.process_iter``.

    Processes that vanish or deny access while being read are skipped;
    only a failure of the scan itself is reported.
    """

    def find_by_names(self, names: Iterable[str]) -> ProcessInfo | None:
        wanted = set(names)
        try:
            for proc in psutil.process_iter(_ATTRS):
                info = proc.info
                name = info.get("name")
                if name not in wanted:
                    continue
                return ProcessInfo(
                    pid=int(info["pid"]),
                    name=name,
                    create_time=info.get("create_time"),
                )
        except (psutil.Error, OSError) as e:
            raise ProcessTableUnavailable(f"Cannot read the process table: {e}") from e
        return None


__all__ = ["PsutilProcessTable"]
