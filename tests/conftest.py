"""Shared pytest fixtures and test-session environment.

Config and log locations are redirected before ``vimtab`` is imported, since
both are resolved at import time.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable, Sequence
from pathlib import Path

import pytest

_SESSION_DIR = Path(tempfile.mkdtemp(prefix="vimtab-tests-"))
os.environ["VIMTAB_CONFIG"] = str(_SESSION_DIR / "config.toml")
os.environ["VIMTAB_LOG_FILE"] = str(_SESSION_DIR / "vimtab.log")

from vimtab.features.instance import ProcessInfo  # noqa: E402


class FakeProcessTable:
    """In-memory process table returning a scripted sequence of answers."""

    def __init__(self, answers: Iterable[ProcessInfo | None] = ()) -> None:
        self.answers: list[ProcessInfo | None] = list(answers)
        self.calls: list[tuple[str, ...]] = []

    def find_by_names(self, names: Iterable[str]) -> ProcessInfo | None:
        self.calls.append(tuple(names))
        if not self.answers:
            return None
        if len(self.answers) == 1:
            return self.answers[0]
        return self.answers.pop(0)


class FakeSpawner:
    """Record spawned argv lists, optionally failing with ``error``."""

    def __init__(self, error: OSError | None = None) -> None:
        self.error = error
        self.spawned: list[list[str]] = []

    def spawn(self, argv: Sequence[str]) -> None:
        if self.error is not None:
            raise self.error
        self.spawned.append(list(argv))


@pytest.fixture
def fake_table() -> FakeProcessTable:
    """Provide a process table that reports no running editor."""

    return FakeProcessTable()


@pytest.fixture
def fake_spawner() -> FakeSpawner:
    """Provide a spawner that records instead of starting processes."""

    return FakeSpawner()


@pytest.fixture
def make_file(tmp_path: Path):
    """Create a file of ``size`` bytes under ``tmp_path``."""

    def _make(relative: str, size: int = 0) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"x" * size)
        return path

    return _make
