"""
Configuration settings for chainconf

Uses pydantic-settings for type-safe configuration management.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables."""

    # Output files
    config_path: str = Field(
        default="./config.json",
        description="Path of the generated configuration file"
    )

    schema_path: str = Field(
        default="./config.schema.json",
        description="Path of the exported JSON Schema"
    )

    # Logging
    log_level: LogLevel = Field(
        default="INFO",
        description="Console log level"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    model_config = SettingsConfigDict(
        env_prefix="CHAINCONF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
