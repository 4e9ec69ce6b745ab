"""Configuration management for vimtab."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from vimtab.config.file_ops import write_text_file
from vimtab.config.paths import default_config_path
from vimtab.platform.logging import logger

EDITOR_DEFAULT: Final[str] = "gvim"
SERVER_NAME_DEFAULT: Final[str] = "GVIM"


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Editor executable looked up on PATH
    editor: str = EDITOR_DEFAULT

    # Server name shared by every remote-tab request
    server_name: str = SERVER_NAME_DEFAULT

    # Log file path
    log_file: Path | None = _path_field()

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> None:
        """Save configuration to file.

        Raises:
            OSError: The file cannot be written.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        write_text_file(destination, self._render_toml(config_dict))
        logger.debug("Configuration saved to %s", destination)

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# vimtab configuration file")
        lines.append("")

        lines.append("# Editor executable (must be on PATH)")
        lines.append(f"editor = {self._format_toml_value(config['editor'])}")
        lines.append("")

        lines.append("# Server name used for --remote-tab requests")
        lines.append(f"server_name = {self._format_toml_value(config['server_name'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/vimtab.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file, creating a default one when missing.

        Args:
            config_file: Explicit file to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None and config_file in (None, cls._loaded_from):
            return cls._instance

        source = config_file or default_config_path()

        if source.exists():
            try:
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", source)
        else:
            instance = cls()
            try:
                instance.save(source)
            except OSError as e:
                logger.warning("Could not create default configuration at %s: %s", source, e)

        cls._instance = instance
        cls._loaded_from = source
        return instance


# Global configuration instance
config = Config.load()
