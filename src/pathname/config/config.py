"""Configuration management for pathname."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from pathname.config.file_ops import write_text_file
from pathname.config.paths import default_config_path, default_log_file
from pathname.platform.logging import logger


DISPATCH_MAX_WORKERS_DEFAULT: int = 4
DISPATCH_THREAD_NAME_PREFIX_DEFAULT: str = "pathname-query"
CONSOLE_LOG_LEVEL_DEFAULT: str = "WARNING"


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
    """Library configuration."""

    # Log file used by configure_logging(); console only when unset
    log_file: Path | None = _path_field()

    console_log_level: str = CONSOLE_LOG_LEVEL_DEFAULT

    # Worker pool backing the non-blocking queries
    dispatch_max_workers: int = DISPATCH_MAX_WORKERS_DEFAULT
    dispatch_thread_name_prefix: str = DISPATCH_THREAD_NAME_PREFIX_DEFAULT

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

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to ``target`` or the default config path.

        Returns:
            Path: File the configuration was written to.
        """
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target if target is not None else default_config_path()
        try:
            content = self._render_toml(config_dict)
            write_text_file(destination, content)
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# pathname configuration file")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append("# Used by pathname.configure_logging(); console only when omitted")
        lines.append(f'# Example: log_file = "{default_log_file()}"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Console log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)")
        lines.append(
            f"console_log_level = {self._format_toml_value(config['console_log_level'])}"
        )
        lines.append("")

        lines.append("# Worker threads used by the *_async queries")
        lines.append(
            f"dispatch_max_workers = {self._format_toml_value(config['dispatch_max_workers'])}"
        )
        lines.append(
            "dispatch_thread_name_prefix = "
            f"{self._format_toml_value(config['dispatch_thread_name_prefix'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization.

        Args:
            value: Value to format

        Returns:
            str: Formatted value
        """
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written to disk.

        Args:
            config_file: File to read. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if config_file is None and cls._instance is not None:
            return cls._instance

        source = config_file if config_file is not None else default_config_path()

        try:
            if source.exists():
                with open(source, "rb") as f:
                    config_dict = tomllib.load(f)
                logger.debug("Configuration loaded from %s", source)
                instance = cls(**config_dict)
            else:
                logger.debug("No configuration at %s, using defaults", source)
                instance = cls()
        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise

        if config_file is None:
            cls._instance = instance
            cls._loaded_from = source
        return instance


# Global configuration instance
config = Config.load()
