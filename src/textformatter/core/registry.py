"""
Formatter Registry

Maps the numeric menu selector to a formatter class. The CLI menu is
rendered from this mapping, so adding a formatter here is all it takes
to offer it on the console.
"""

import logging
import re
from typing import Any, Dict, List, Optional, Type

from .abstractions import ITextFormatter
from .formatters import LowerCaseFormatter, TitleCaseFormatter, UpperCaseFormatter
from .types import FormatChoice, UnknownFormatError

logger = logging.getLogger(__name__)

FORMAT_OPTIONS: Dict[FormatChoice, Type[ITextFormatter]] = {
    FormatChoice.UPPERCASE: UpperCaseFormatter,
    FormatChoice.LOWERCASE: LowerCaseFormatter,
    FormatChoice.TITLE_CASE: TitleCaseFormatter,
}

# Leading integer of a token, as read by a whitespace-skipping stream extraction
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_choice(raw: Any) -> Optional[FormatChoice]:
    """
    Parse a selector into a FormatChoice.
    
    Strings are read like an integer stream extraction: leading
    whitespace is skipped, then an optional sign and a run of digits.
    Characters after the digits are ignored, so "2abc" selects 2.
    
    Args:
        raw: FormatChoice, int, str or None
    
    Returns:
        Matching FormatChoice, or None for anything else (never raises)
    """
    if raw is None or isinstance(raw, bool):
        return None
    
    if isinstance(raw, str):
        match = _LEADING_INT.match(raw)
        if match is None:
            logger.debug(f"Selector {raw!r} is not numeric")
            return None
        value = int(match.group(1))
    elif isinstance(raw, int):
        value = int(raw)
    else:
        return None
    
    try:
        return FormatChoice(value)
    except ValueError:
        logger.debug(f"Selector {value} is out of range")
        return None


def create_formatter(choice: Any) -> ITextFormatter:
    """
    Create a new formatter for a selector.
    
    Args:
        choice: FormatChoice or its integer value
    
    Returns:
        Fresh formatter instance
    
    Raises:
        UnknownFormatError: If choice does not name a registered formatter
    """
    if isinstance(choice, bool) or not isinstance(choice, int):
        raise UnknownFormatError(choice)
    
    try:
        formatter_cls = FORMAT_OPTIONS[FormatChoice(choice)]
    except (ValueError, KeyError):
        raise UnknownFormatError(choice) from None
    
    return formatter_cls()


def menu_lines() -> List[str]:
    """Menu entries in selector order, e.g. "1) Uppercase"."""
    return [
        f"{int(choice)}) {formatter_cls().name}"
        for choice, formatter_cls in FORMAT_OPTIONS.items()
    ]
