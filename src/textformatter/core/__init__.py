"""Core formatting strategies and the context that applies them."""

from .abstractions import ITextFormatter
from .formatters import (
    UpperCaseFormatter,
    LowerCaseFormatter,
    TitleCaseFormatter,
)
from .processor import TextProcessor
from .registry import FORMAT_OPTIONS, create_formatter, parse_choice, menu_lines
from .types import FormatChoice, FormatRequest, TextFormatterError, UnknownFormatError
from .logger import get_logger

__all__ = [
    # Abstractions
    "ITextFormatter",
    # Strategies
    "UpperCaseFormatter",
    "LowerCaseFormatter",
    "TitleCaseFormatter",
    # Context
    "TextProcessor",
    # Registry
    "FORMAT_OPTIONS",
    "create_formatter",
    "parse_choice",
    "menu_lines",
    # Types
    "FormatChoice",
    "FormatRequest",
    "TextFormatterError",
    "UnknownFormatError",
    # Logging
    "get_logger",
]
