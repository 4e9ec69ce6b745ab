"""Tests for the ``LaunchRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from vimtab.platform.logging import LaunchRichHandler, setup_logger


def _make_handler() -> LaunchRichHandler:
    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return LaunchRichHandler(console=console)


def _build_record(**extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="vimtab",
        level=logging.INFO,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_long_paths_are_abbreviated() -> None:
    record = _build_record(
        launch_event="launch.file.remote",
        sequence=2,
        total_files=3,
        path="/home/user/projects/app/src/pkg/module.py",
    )

    rendered = _make_handler().render_message(record, "")

    assert isinstance(rendered, Text)
    assert rendered.plain.endswith("[2/3] Opened tab for …/app/src/pkg/module.py")


def test_short_paths_are_kept() -> None:
    record = _build_record(launch_event="launch.file.fresh", path="/tmp/a.txt")

    rendered = _make_handler().render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Started editor with /tmp/a.txt" in rendered.plain


def test_windows_paths_keep_backslashes() -> None:
    record = _build_record(launch_event="launch.file.fresh", path="C:\\Users\\me\\a.txt")

    rendered = _make_handler().render_message(record, "")

    assert isinstance(rendered, Text)
    assert "C:\\Users\\me\\a.txt" in rendered.plain


def test_error_event_includes_message() -> None:
    record = _build_record(
        launch_event="launch.file.error",
        path="/tmp/gone.txt",
        error_message="Path: '/tmp/gone.txt' doesn't exist.",
    )

    rendered = _make_handler().render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Failed /tmp/gone.txt (Path: '/tmp/gone.txt' doesn't exist.)" in rendered.plain


def test_summary_event() -> None:
    record = _build_record(launch_event="launch.batch.summary", opened=2, total_files=3, failed=1)

    rendered = _make_handler().render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Opened 2/3 file(s) [failed=1]" in rendered.plain


def test_probe_wait_event() -> None:
    record = _build_record(launch_event="launch.probe.wait", wait_ms=1500.0)

    rendered = _make_handler().render_message(record, "")

    assert isinstance(rendered, Text)
    assert "Waiting for editor warm-up (1500 ms)" in rendered.plain


def test_plain_messages_fall_through() -> None:
    rendered = _make_handler().render_message(_build_record(), "hello")

    assert not isinstance(rendered, Text) or "hello" in rendered.plain


def test_setup_logger_writes_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "vimtab.log"
    console = Console(file=StringIO())

    logger = setup_logger(log_file=log_file, console=console)
    logger.debug("written to file")
    for handler in logger.handlers:
        handler.flush()

    assert "written to file" in log_file.read_text(encoding="utf-8")
    assert len(logger.handlers) == 2
    _ = setup_logger(log_file=None)
