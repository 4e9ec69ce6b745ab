"""
Summary: Export editor instance discovery symbols and OS adapters.
Why: Let the dispatcher and tests depend on ports instead of psutil or subprocess.
"""

from .adapters import PsutilProcessTable, SubprocessSpawner
from .domain.models import ProbeState, ProcessInfo, ProcessTableUnavailable
from .usecases.ports import ProcessSpawner, ProcessTable
from .usecases.probe import InstanceProbe, editor_process_names

__all__ = [
    "InstanceProbe",
    "ProbeState",
    "ProcessInfo",
    "ProcessSpawner",
    "ProcessTable",
    "ProcessTableUnavailable",
    "PsutilProcessTable",
    "SubprocessSpawner",
    "editor_process_names",
]
