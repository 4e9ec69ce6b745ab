"""Rich console handler for launch events.

Where: platform/logging/handlers.py
What: Render structured ``launch_event`` records with icons, colours and compact paths.
Why: Keep presentation rules out of the use cases that emit the events.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class LaunchRichHandler(RichHandler):
    """Rich handler that renders launch events and abbreviates long paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "launch.file.fresh": ("🚀", "cyan"),
        "launch.file.remote": ("📑", "green"),
        "launch.file.error": ("⛔", "red"),
        "launch.probe.found": ("🔗", "green"),
        "launch.probe.missing": ("ℹ️", "yellow"),
        "launch.probe.wait": ("⏳", "yellow"),
        "launch.batch.summary": ("✅", "green"),
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 4

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str) -> Text:
        """Format ``path`` keeping only its last few segments."""

        pure_path: PurePath = (
            PureWindowsPath(path) if "\\" in path else PurePosixPath(path)
        )
        is_windows = isinstance(pure_path, PureWindowsPath)
        separator = "\\" if is_windows else "/"
        anchor = pure_path.anchor
        body_parts = [part for part in pure_path.parts if part and part != anchor]

        truncated = len(body_parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            body_parts = body_parts[-self._PATH_SEGMENT_LIMIT:]
            prefix = "…" + separator
        elif anchor:
            prefix = anchor.rstrip("\\/") + separator if is_windows else separator
        else:
            prefix = ""

        display = prefix + separator.join(body_parts) or "."

        text = Text()
        for char in display:
            if char in {separator, "…"}:
                _ = text.append(char, style=Style(color="magenta"))
            else:
                _ = text.append(char, style=Style(color="white"))
        return text

    def _render_launch_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured launch events with dedicated styling."""

        event = getattr(record, "launch_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        if event == "launch.batch.summary":
            opened = getattr(record, "opened", 0)
            total_files = getattr(record, "total_files", 0)
            failed = getattr(record, "failed", 0)
            _ = body.append(f"Opened {opened}/{total_files} file(s)")
            if failed:
                _ = body.append(f" [failed={failed}]")
        elif event == "launch.probe.found":
            _ = body.append("Reusing running editor")
            pid = getattr(record, "pid", None)
            if isinstance(pid, int):
                _ = body.append(f" (pid={pid})")
        elif event == "launch.probe.missing":
            _ = body.append("No running editor found")
        elif event == "launch.probe.wait":
            wait_ms = getattr(record, "wait_ms", None)
            _ = body.append("Waiting for editor warm-up")
            if isinstance(wait_ms, (int, float)):
                _ = body.append(f" ({wait_ms:.0f} ms)")
        else:
            sequence = getattr(record, "sequence", None)
            total_files = getattr(record, "total_files", None)
            if isinstance(sequence, int) and sequence > 0:
                if isinstance(total_files, int) and total_files > 0:
                    _ = body.append(f"[{sequence}/{total_files}] ")
                else:
                    _ = body.append(f"[{sequence}] ")

            prefix = {
                "launch.file.fresh": "Started editor with ",
                "launch.file.remote": "Opened tab for ",
                "launch.file.error": "Failed ",
            }.get(event, "")
            _ = body.append(prefix)

            path = getattr(record, "path", None)
            if path:
                _ = body.append_text(self._format_path(str(path)))

            if event == "launch.file.error":
                error_message = getattr(record, "error_message", None)
                if error_message:
                    _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for launch events."""

        launch_text = self._render_launch_message(record)
        if launch_text is not None:
            return launch_text
        return super().render_message(record, message)


__all__ = ["LaunchRichHandler"]
