"""Logging utilities for textformatter."""

import logging
import sys
from typing import Optional, Union


def get_logger(
    name: Optional[str] = None, level: Union[int, str] = logging.WARNING
) -> logging.Logger:
    """Get a configured logger instance.

    Records go to stderr so they never mix with the formatted output
    on stdout.

    Args:
        name: Logger name (defaults to the package logger)
        level: Logging level, as an int or a level name

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name or "textformatter")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
