"""Shared path utilities for configuration and log locations.

This module centralizes how the launcher discovers where its config and
log files live.

Policy:
- Config: ``~/.config/vimtab/config.toml`` unless overridden by
  ``VIMTAB_CONFIG``. ``XDG_CONFIG_HOME`` replaces ``~/.config`` when set.
- Log file: ``~/.local/state/vimtab/vimtab.log`` unless overridden by
  ``VIMTAB_LOG_FILE``. ``XDG_STATE_HOME`` replaces ``~/.local/state`` when set.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final

APP_DIR_NAME: Final[str] = "vimtab"

_ENV_CONFIG_FILE: Final[str] = "VIMTAB_CONFIG"
_ENV_LOG_FILE: Final[str] = "VIMTAB_LOG_FILE"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _xdg_home(env_var: str, fallback: str, env: Mapping[str, str] | None = None) -> Path:
    """Return an XDG base directory, falling back to a path under ``~``."""

    mapping = env if env is not None else os.environ
    value = (mapping.get(env_var) or "").strip()
    if value:
        return Path(value)
    return Path.home() / fallback


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_FILE,
        default_factory=lambda: _xdg_home("XDG_CONFIG_HOME", ".config", env)
        / APP_DIR_NAME
        / "config.toml",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    """Get the default log file path."""

    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_LOG_FILE,
        default_factory=lambda: _xdg_home("XDG_STATE_HOME", ".local/state", env)
        / APP_DIR_NAME
        / "vimtab.log",
    )


__all__ = [
    "APP_DIR_NAME",
    "default_config_path",
    "default_log_file",
    "resolve_overridable_path",
]
