"""
Configuration using Pydantic Settings.

Values are read from ``CONTRAST_*`` environment variables or a ``.env``
file. Command-line options override them per invocation.
"""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class OutputFormat(str, Enum):
    """Result output formats."""

    TEXT = "text"
    JSON = "json"


class ContrastSettings(BaseSettings):
    """Contrast tool settings."""

    model_config = SettingsConfigDict(
        env_prefix="CONTRAST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = Field(default=LogLevel.WARNING, description="Logging level")
    precision: Optional[int] = Field(
        default=None,
        ge=0,
        le=15,
        description="Decimal places for the printed ratio (unset prints full precision)",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT, description="Output format for results"
    )
    error_exit_code: int = Field(
        default=1,
        ge=0,
        le=255,
        description="Exit status for invalid color input (0 keeps the legacy behavior)",
    )


@lru_cache()
def get_settings() -> ContrastSettings:
    """
    Get cached settings instance.

    Returns:
        ContrastSettings with loaded configuration.
    """
    return ContrastSettings()


def get_settings_uncached() -> ContrastSettings:
    """Get fresh settings instance (useful for testing)."""
    return ContrastSettings()
