"""Configuration loading for the agespan age calculator.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from agespan.adapters.parsing.iso import IsoDateParser


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. Variables are prefixed
    with ``AGESPAN_``.
    """

    model_config = SettingsConfigDict(
        env_prefix="AGESPAN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Output configuration
    output_format: Literal["json", "text"] = Field(
        default="json",
        description="Output format for command results",
    )
    reference_date: str = Field(
        default="",
        description="End date (yyyy-mm-dd) used when none is given; empty means today",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging",
    )

    @field_validator("reference_date")
    @classmethod
    def validate_reference_date(cls, v: str) -> str:
        """Ensure the reference date, when set, is a valid ISO date."""
        v = v.strip()
        if v:
            IsoDateParser().parse(v)
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
