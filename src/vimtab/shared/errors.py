"""
Summary: Base class for failures that abort a whole launch request.
Why: Let any layer stop the run while the CLI alone picks the exit code.
"""

from __future__ import annotations


class LaunchAborted(Exception):
    """A structural or resource problem; no further files are processed."""

    exit_code: int

    def __init__(self, message: str = "", exit_code: int = 1) -> None:
        self.exit_code = exit_code
        super().__init__(message)


__all__ = ["LaunchAborted"]
