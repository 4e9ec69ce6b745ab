"""Where: src/vimtab/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to feature layers without file I/O.
Assumptions: - Blank strings in the config file mean "use the default".
"""

from __future__ import annotations

from vimtab.config.config import (
    EDITOR_DEFAULT,
    SERVER_NAME_DEFAULT,
    config as app_config,
)

_editor = app_config.editor.strip() if isinstance(app_config.editor, str) else ""
EDITOR_EXECUTABLE: str = _editor or EDITOR_DEFAULT

_server_name = app_config.server_name.strip() if isinstance(app_config.server_name, str) else ""
SERVER_NAME: str = _server_name or SERVER_NAME_DEFAULT


__all__ = ["EDITOR_EXECUTABLE", "SERVER_NAME"]
