"""
Summary: Package marker for process adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .process_table_adapter import PsutilProcessTable
from .spawner_adapter import SubprocessSpawner

__all__ = ["PsutilProcessTable", "SubprocessSpawner"]
