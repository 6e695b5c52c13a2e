"""textformatter: runtime-selectable text formatting with the Strategy pattern."""

from .core import (
    ITextFormatter,
    UpperCaseFormatter,
    LowerCaseFormatter,
    TitleCaseFormatter,
    TextProcessor,
    FormatChoice,
    FormatRequest,
    TextFormatterError,
    UnknownFormatError,
    create_formatter,
    parse_choice,
)
from .config import Settings, load_settings

__version__ = "1.0.0"

__all__ = [
    # Strategy interface and implementations
    "ITextFormatter",
    "UpperCaseFormatter",
    "LowerCaseFormatter",
    "TitleCaseFormatter",
    # Context
    "TextProcessor",
    # Selection
    "FormatChoice",
    "FormatRequest",
    "create_formatter",
    "parse_choice",
    # Errors
    "TextFormatterError",
    "UnknownFormatError",
    # Configuration
    "Settings",
    "load_settings",
]
