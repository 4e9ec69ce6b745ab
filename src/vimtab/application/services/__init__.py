"""Application-level services."""

from .launch_service import (
    BatchTooLarge,
    EditorNotInstalled,
    LaunchAborted,
    LaunchFailure,
    LaunchReport,
    LaunchRequest,
    LaunchService,
    NothingToOpen,
    TooManyArguments,
)

__all__ = [
    "BatchTooLarge",
    "EditorNotInstalled",
    "LaunchAborted",
    "LaunchFailure",
    "LaunchReport",
    "LaunchRequest",
    "LaunchService",
    "NothingToOpen",
    "TooManyArguments",
]
