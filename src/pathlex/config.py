"""User settings for pathlex."""

import json
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self

from loguru import logger
from platformdirs import user_config_path

from pathlex.exceptions import ConfigValidationError
from pathlex.exceptions import ConfigVersionError
from pathlex.operations.absolute import DEFAULT_SCHEMES

CONFIG_VERSION = 1
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """Settings read from the user's config file."""

    version: int = CONFIG_VERSION
    schemes: tuple[str, ...] = field(default=DEFAULT_SCHEMES)
    log_level: str = "WARNING"

    @classmethod
    def default_path(cls) -> Path:
        """Get default config location using platformdirs."""
        return user_config_path("pathlex") / "config.json"

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Config must be a JSON object")
        if "version" not in data:
            raise ConfigValidationError("Config missing 'version' key")

        version = data["version"]
        if not isinstance(version, int):
            raise ConfigValidationError("Config 'version' must be an integer")
        if version > CONFIG_VERSION:
            raise ConfigVersionError(
                f"Config version {version} is newer than supported "
                f"version {CONFIG_VERSION}"
            )

        schemes = data.get("schemes", list(DEFAULT_SCHEMES))
        if not isinstance(schemes, list) or not all(
            isinstance(s, str) and s for s in schemes
        ):
            raise ConfigValidationError("Config 'schemes' must be a list of names")

        log_level = data.get("log_level", "WARNING")
        if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
            raise ConfigValidationError(f"Unknown log level in config: {log_level}")

        return cls(
            version=version,
            schemes=tuple(s.lower() for s in schemes),
            log_level=log_level.upper(),
        )

    @classmethod
    def load(cls, path: Path | None = None) -> Self:
        """Load settings from JSON file. Returns defaults if it doesn't exist.

        Args:
            path: Path to config file. If None, uses default location.
        """
        if path is None:
            path = cls.default_path()

        if not path.exists():
            logger.debug("No config at {}, using defaults", path)
            return cls()

        try:
            data = json.loads(path.read_text())
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigValidationError(f"Invalid JSON in config: {e}") from e

        settings = cls.from_dict(data)
        logger.debug("Loaded config from {}", path)
        return settings
