"""
Centralized configuration management for usage_tally.
Provides environment-based configuration with validation and defaults.
"""

__author__ = "Lene Preuss <lene.preuss@gmail.com>"

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from usage_tally.conf import DEFAULT_PROJECTS_DIR, DEFAULT_LOG_LEVEL, VALID_LOG_LEVELS
from usage_tally.exceptions import ConfigurationError


@dataclass
class Config:
    """Configuration class containing all application settings."""

    projects_dir: Path
    max_workers: Optional[int]
    log_level: str

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(
                f"MAX_WORKERS must be a positive integer, got {self.max_workers}",
                config_key="MAX_WORKERS",
            )

        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"LOG_LEVEL must be one of {VALID_LOG_LEVELS}, got {self.log_level}",
                config_key="LOG_LEVEL",
            )


def _parse_max_workers(value: Optional[str]) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(
            f"MAX_WORKERS must be an integer, got {value!r}", config_key="MAX_WORKERS"
        ) from e


class ConfigManager:
    """Manages application configuration from environment variables."""

    _instance: Optional[Config] = None

    @classmethod
    def get_config(cls) -> Config:
        """
        Get the application configuration.
        Uses singleton pattern to ensure consistent configuration across the app.
        """
        if cls._instance is None:
            cls._instance = cls._create_config()
        return cls._instance

    @classmethod
    def reset_config(cls) -> None:
        """Reset the configuration instance (useful for testing)."""
        cls._instance = None

    @classmethod
    def _create_config(cls) -> Config:
        """Create configuration from environment variables and an optional .env file."""
        load_dotenv(override=False)

        projects_dir = os.getenv("CLAUDE_PROJECTS_DIR")
        return Config(
            projects_dir=Path(projects_dir).expanduser() if projects_dir else DEFAULT_PROJECTS_DIR,
            max_workers=_parse_max_workers(os.getenv("MAX_WORKERS")),
            log_level=os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )
