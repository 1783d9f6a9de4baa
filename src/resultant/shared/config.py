"""Library configuration.

Uses pydantic-settings for environment variable support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings with environment variable support.

    All settings can be overridden via environment variables prefixed with
    ``RESULTANT_``.
    Example: RESULTANT_UNWRAP_MESSAGE, RESULTANT_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="RESULTANT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # =========================================================================
    # Result
    # =========================================================================
    unwrap_message: str = Field(
        default="Tried to unwrap a Fail result",
        description="Message carried by UnwrapOnFailureError from unwrap()",
    )

    # =========================================================================
    # Logging
    # =========================================================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "console"] = Field(
        default="console",
        description="Log output format",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path",
    )

    # =========================================================================
    # Validators
    # =========================================================================
    @field_validator("unwrap_message")
    @classmethod
    def validate_unwrap_message(cls, v: str) -> str:
        """Strip surrounding whitespace and reject empty messages."""
        v = v.strip()
        if not v:
            raise ValueError("unwrap_message cannot be empty")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
