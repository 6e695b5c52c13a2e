"""Shared type definitions for text formatting."""

from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class FormatChoice(IntEnum):
    """Numeric selector for a formatting strategy."""

    UPPERCASE = 1
    LOWERCASE = 2
    TITLE_CASE = 3


class FormatRequest(BaseModel):
    """
    One formatting request read from the console.

    The selector is lenient: anything that does not parse to a known
    FormatChoice becomes None, meaning "leave the text unchanged".
    """

    text: str = Field(default="", description="Subject text to format")
    choice: Optional[FormatChoice] = Field(
        default=None, description="Selected format, None for passthrough"
    )

    @field_validator("choice", mode="before")
    @classmethod
    def _coerce_choice(cls, value: Any) -> Optional[FormatChoice]:
        # Imported here to avoid a cycle with the registry module
        from .registry import parse_choice

        return parse_choice(value)


class TextFormatterError(Exception):
    """Base error for the textformatter package."""


class UnknownFormatError(TextFormatterError):
    """Raised when a selector does not name a known formatter."""

    def __init__(self, choice: Any):
        self.choice = choice
        super().__init__(f"Unknown format choice: {choice!r}")
