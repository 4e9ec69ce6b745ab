"""
Summary: Tests for fresh-versus-remote dispatch and probe caching.
Why: Probing once per run and skipping vanished paths are the core rules.
"""

from __future__ import annotations

import time
from pathlib import Path

import pytest

from vimtab.features.dispatch import CommandSpawnError, Dispatcher, ItemPathNotExist
from vimtab.features.instance import InstanceProbe, ProbeState, ProcessInfo

RUNNING = ProcessInfo(pid=99, name="gvim", create_time=0.0)


def _dispatcher(table, spawner) -> Dispatcher:
    probe = InstanceProbe(table, executable="gvim", clock=time.time, sleep=lambda _s: None)
    return Dispatcher(probe=probe, spawner=spawner, executable="gvim", server_name="GVIM")


def test_fresh_instance_when_none_running(fake_table, fake_spawner, make_file) -> None:
    """With no editor running the file is passed to a new editor process."""

    target = make_file("a.txt", 10)
    dispatcher = _dispatcher(fake_table, fake_spawner)

    dispatcher.open(target)

    assert fake_spawner.spawned == [["gvim", str(target)]]
    assert dispatcher.launch_count == 1
    assert dispatcher.state is ProbeState.INSTANCE_NOT_FOUND


def test_remote_tab_when_instance_running(fake_table, fake_spawner, make_file) -> None:
    target = make_file("a.txt")
    fake_table.answers = [RUNNING]
    dispatcher = _dispatcher(fake_table, fake_spawner)

    dispatcher.open(target)

    assert fake_spawner.spawned == [
        ["gvim", "--servername", "GVIM", "--remote-tab", str(target)]
    ]
    assert dispatcher.launch_count == 1


def test_probe_not_repeated_once_found(fake_table, fake_spawner, make_file) -> None:
    """A found instance is trusted for every remaining file."""

    files = [make_file(f"f{index}.txt") for index in range(4)]
    fake_table.answers = [RUNNING]
    dispatcher = _dispatcher(fake_table, fake_spawner)

    for path in files:
        dispatcher.open(path)

    assert len(fake_table.calls) == 1
    assert dispatcher.launch_count == 4
    assert all("--remote-tab" in argv for argv in fake_spawner.spawned)


def test_not_found_is_reprobed_each_file(fake_table, fake_spawner, make_file) -> None:
    """After a fresh spawn the next file sees the new editor and opens a tab."""

    first, second, third = (make_file(f"f{index}.txt") for index in range(3))
    fake_table.answers = [None, RUNNING]
    dispatcher = _dispatcher(fake_table, fake_spawner)

    dispatcher.open(first)
    dispatcher.open(second)
    dispatcher.open(third)

    assert len(fake_table.calls) == 2
    assert fake_spawner.spawned[0] == ["gvim", str(first)]
    assert fake_spawner.spawned[1][-2:] == ["--remote-tab", str(second)]
    assert fake_spawner.spawned[2][-2:] == ["--remote-tab", str(third)]
    assert dispatcher.state is ProbeState.INSTANCE_FOUND


def test_missing_path_never_spawns(tmp_path: Path, fake_table, fake_spawner) -> None:
    """A vanished path fails before probing or spawning."""

    dispatcher = _dispatcher(fake_table, fake_spawner)
    missing = tmp_path / "gone.txt"

    with pytest.raises(ItemPathNotExist) as excinfo:
        dispatcher.open(missing)

    assert excinfo.value.path == missing
    assert fake_spawner.spawned == []
    assert fake_table.calls == []
    assert dispatcher.state is ProbeState.NEVER_CHECKED
    assert dispatcher.launch_count == 0


def test_spawn_failure_is_wrapped(fake_table, fake_spawner, make_file) -> None:
    """OS errors become ``CommandSpawnError`` and do not count as launches."""

    target = make_file("a.txt")
    cause = PermissionError("denied")
    fake_spawner.error = cause
    dispatcher = _dispatcher(fake_table, fake_spawner)

    with pytest.raises(CommandSpawnError) as excinfo:
        dispatcher.open(target)

    assert excinfo.value.cause is cause
    assert excinfo.value.argv == ("gvim", str(target))
    assert dispatcher.launch_count == 0


def test_launch_counter_never_decrements(fake_table, fake_spawner, make_file, tmp_path: Path) -> None:
    dispatcher = _dispatcher(fake_table, fake_spawner)
    dispatcher.open(make_file("a.txt"))

    with pytest.raises(ItemPathNotExist):
        dispatcher.open(tmp_path / "missing.txt")

    assert dispatcher.launch_count == 1
