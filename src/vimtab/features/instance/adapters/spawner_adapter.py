"""src/vimtab/features/instance/adapters/spawner_adapter.py
What: Adapter implementing ProcessSpawner with subprocess.Popen.
Why: Spawned editors must outlive the launcher and never block it."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from typing import Any

from ..usecases.ports import ProcessSpawner


class SubprocessSpawner(ProcessSpawner):
    """Fire-and-forget process creation with detached standard streams."""

    def spawn(self, argv: Sequence[str]) -> None:
        options: dict[str, Any] = {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
            "close_fds": True,
        }
        if os.name == "posix":
            options["start_new_session"] = True
        _ = subprocess.Popen(list(argv), **options)  # noqa: S603


__all__ = ["SubprocessSpawner"]
