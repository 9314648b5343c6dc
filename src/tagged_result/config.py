"""Configuration management using Pydantic Settings.

Loads configuration from ``TAGGED_RESULT_*`` environment variables with
validation. Only the capture and logging helpers read it; Result values
themselves are configuration-free.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Capture Configuration
    log_captured_exceptions: bool = Field(
        default=True, description="Log exceptions converted to Err by as_result"
    )
    captured_log_level: str = Field(
        default="DEBUG", description="Logging level for captured exceptions"
    )

    model_config = SettingsConfigDict(
        env_prefix="TAGGED_RESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", "captured_log_level")
    @classmethod
    def validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get library settings (singleton).

    Returns:
        Library settings
    """
    return Settings()
