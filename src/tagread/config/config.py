"""Configuration management for tagread."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from tagread.config.paths import default_config_path
from tagread.platform.logging import logger

ID3_SEARCH_HORIZON_DEFAULT: Final[int] = 1024 * 1024
MP4_MAX_ATOM_DEPTH_DEFAULT: Final[int] = 32


def _is_positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _setting(default: Any, *comment: str, path: bool = False) -> Any:
    """Declare a config field; ``comment`` lines are written above it in the TOML file."""
    return field(default=default, metadata={"path": path, "comment": comment})


@dataclass
class Config:
    """Application configuration."""

    log_file: Path | None = _setting(
        None,
        "Log file path (optional)",
        "Debug-level decode logs are appended here by the CLI",
        'Example: log_file = "/path/to/logs/tagread.log"',
        path=True,
    )

    id3_search_horizon: int = _setting(
        ID3_SEARCH_HORIZON_DEFAULT,
        "ID3 marker search horizon in bytes",
        "Tags starting at or beyond this offset are not looked for",
    )

    mp4_max_atom_depth: int = _setting(
        MP4_MAX_ATOM_DEPTH_DEFAULT,
        "Maximum MP4 atom nesting depth",
        "Deeper trees are rejected as malformed",
    )

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects and reset invalid limits."""
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("path", False):
                if isinstance(value, str):
                    setattr(self, f.name, Path(value) if value.strip() else None)
            elif isinstance(f.default, int) and not _is_positive_int(value):
                logger.warning("Invalid %s %r in configuration, using %d", f.name, value, f.default)
                setattr(self, f.name, f.default)

    def save(self, target: Path | None = None) -> Path:
        """Write the configuration as commented TOML.

        Args:
            target: Destination; defaults to :func:`default_config_path`.

        Returns:
            Path: The file that was written.
        """
        target = target or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(), encoding="utf-8")
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self) -> str:
        values = asdict(self)
        lines = ["# tagread Configuration File", ""]
        for f in fields(self):
            lines.extend(f"# {comment}" for comment in f.metadata.get("comment", ()))
            # TOML has no null; unset optional values are left out.
            if values[f.name] is not None:
                lines.append(f"{f.name} = {self._format_toml_value(values[f.name])}")
            lines.append("")
        return "\n".join(lines)

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults; nothing is written.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))

                logger.debug("Configuration loaded from %s", config_file)
                instance = cls(**{key: value for key, value in config_dict.items() if key in known})
            else:
                logger.debug("No configuration file at %s, using defaults", config_file)
                instance = cls()

            cls._instance = instance
            cls._loaded_from = config_file
            return instance

        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
