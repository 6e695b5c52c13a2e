"""
Text Processor - the Strategy context

Holds at most one formatter and delegates to it. With no formatter
bound, text passes through unchanged.
"""

import logging
from typing import Optional

from .abstractions import ITextFormatter

logger = logging.getLogger(__name__)


class TextProcessor:
    """
    Context that applies the currently selected formatter.
    
    The processor owns its formatter: set_formatter() replaces the
    previous one, and set_formatter(None) returns to the unbound
    (identity) state.
    
    Example:
        processor = TextProcessor()
        processor.format("hello")           # "hello"
        processor.set_formatter(UpperCaseFormatter())
        processor.format("hello")           # "HELLO"
    """
    
    def __init__(self, formatter: Optional[ITextFormatter] = None):
        self._formatter: Optional[ITextFormatter] = formatter
    
    @property
    def formatter(self) -> Optional[ITextFormatter]:
        """Currently bound formatter, or None."""
        return self._formatter
    
    def set_formatter(self, formatter: Optional[ITextFormatter]) -> None:
        """
        Replace the bound formatter.
        
        Args:
            formatter: New formatter, or None to unbind
        """
        previous = self._formatter
        self._formatter = formatter
        logger.debug(
            f"Formatter changed: {_describe(previous)} -> {_describe(formatter)}"
        )
    
    def format(self, text: str) -> str:
        """Format text with the bound formatter, or return it unchanged."""
        if self._formatter is None:
            return text
        return self._formatter.format(text)


def _describe(formatter: Optional[ITextFormatter]) -> str:
    return formatter.name if formatter is not None else "none"
