"""
Configuration

Settings come from environment variables, optionally loaded from a .env
file. Configuration only affects logging; the console protocol and the
formatting behavior are fixed.
"""

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

LOG_LEVEL_ENV = "TEXTFORMATTER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseModel):
    """Runtime settings for the textformatter console."""

    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL, description="Level name for the package logger"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Optional[str]) -> str:
        # Unknown level names fall back to the default instead of failing
        name = str(value or "").strip().upper()
        return name if name in _LEVEL_NAMES else DEFAULT_LOG_LEVEL


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Load settings from the environment.

    Args:
        env_file: Path to a .env file (defaults to searching for ".env")

    Returns:
        Validated Settings
    """
    load_dotenv(env_file)
    return Settings(log_level=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL))
