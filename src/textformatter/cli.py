"""
Console entry point.

Reads a sentence and a format selector, installs the selected formatter
into a TextProcessor and prints the result:

    Enter a sentence: tHiS iS a TeSt

    Choose a format:
    1) Uppercase
    2) Lowercase
    3) Title Case
    Enter choice (1-3): 3

    Formatted output:
    This Is A Test

An invalid selector never fails the program: the text is printed
unchanged after a notice.
"""

import logging
import sys
from typing import Optional, TextIO

from .config import load_settings
from .core import (
    FormatRequest,
    TextProcessor,
    UnknownFormatError,
    create_formatter,
    get_logger,
    menu_lines,
)

logger = logging.getLogger(__name__)

SENTENCE_PROMPT = "Enter a sentence: "
CHOICE_PROMPT = "Enter choice (1-3): "
INVALID_CHOICE_NOTICE = "Invalid choice. Using default (no formatting)."
OUTPUT_HEADER = "Formatted output:"


def _prompt(stdout: TextIO, message: str) -> None:
    stdout.write(message)
    stdout.flush()


def read_sentence(stdin: TextIO) -> str:
    """Read one full line, keeping interior whitespace. EOF yields ""."""
    line = stdin.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line


def read_selector(stdin: TextIO) -> Optional[str]:
    """
    Read the selector token.

    Blank lines are skipped the way a whitespace-skipping integer read
    skips them. Returns None at end of input.
    """
    while True:
        line = stdin.readline()
        if not line:
            return None
        if line.strip():
            return line


def render_menu() -> str:
    return "\nChoose a format:\n" + "\n".join(menu_lines()) + "\n" + CHOICE_PROMPT


def run(stdin: TextIO, stdout: TextIO) -> int:
    """
    Run one interactive formatting session.

    Args:
        stdin: Stream to read the sentence and the selector from
        stdout: Stream for prompts and output

    Returns:
        Exit status, always 0
    """
    processor = TextProcessor()

    _prompt(stdout, SENTENCE_PROMPT)
    text = read_sentence(stdin)

    _prompt(stdout, render_menu())
    raw_choice = read_selector(stdin)

    request = FormatRequest(text=text, choice=raw_choice)
    logger.debug(f"Request: choice={request.choice!r}, {len(request.text)} chars")

    try:
        processor.set_formatter(create_formatter(request.choice))
    except UnknownFormatError as e:
        logger.info(f"{e}; passing text through unchanged")
        stdout.write(INVALID_CHOICE_NOTICE + "\n")

    stdout.write(f"\n{OUTPUT_HEADER}\n")
    stdout.write(processor.format(request.text) + "\n")
    stdout.flush()
    return 0


def main() -> int:
    """Console script entry point."""
    settings = load_settings()
    get_logger("textformatter", level=settings.log_level)

    try:
        return run(sys.stdin, sys.stdout)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 0

