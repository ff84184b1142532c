"""
Configuration settings for the directory listing library.
"""

import logging
import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from dirlist.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()


class Settings(BaseModel):
    """Library settings loaded from environment variables."""

    log_level: str = Field("WARNING", description="Logging level name")
    initial_capacity: int = Field(
        10, ge=1, description="Slots allocated before a directory is read"
    )
    growth_increment: int = Field(
        10, ge=1, description="Slots added whenever a read needs more room"
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from ``DIRLIST_*`` environment variables.

        Returns:
            Validated Settings instance

        Raises:
            ConfigurationError: If a variable holds an invalid value
        """
        values: dict[str, str] = {}
        for field_name, key in (
            ("log_level", "DIRLIST_LOG_LEVEL"),
            ("initial_capacity", "DIRLIST_INITIAL_CAPACITY"),
            ("growth_increment", "DIRLIST_GROWTH_INCREMENT"),
        ):
            value = os.getenv(key)
            if value:
                values[field_name] = value

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid dirlist configuration: {e}") from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings.from_env()
