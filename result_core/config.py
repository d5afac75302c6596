"""
Library configuration using Pydantic Settings.

Settings are read from ``RESULT_*`` environment variables or a ``.env`` file.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ResultSettings(BaseSettings):
    """Logging and diagnostics settings for result_core."""

    model_config = SettingsConfigDict(
        env_prefix="RESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(default=False, description="Render logs as JSON")
    log_captured_errors: bool = Field(
        default=False,
        description="Log exceptions converted to Failure by try_catch",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v


@lru_cache
def get_settings() -> ResultSettings:
    """
    Get cached library settings.

    Returns:
        Configured ResultSettings instance.
    """
    return ResultSettings()
