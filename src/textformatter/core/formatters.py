"""
Concrete Text Formatter Implementations

Implements the uppercase, lowercase and title case strategies.

Case mapping follows the default "C" locale: only ASCII letters change
case. Every other character passes through unchanged, so the output
always has the same length as the input.
"""

import string

from .abstractions import ITextFormatter

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# isspace() in the "C" locale
ASCII_WHITESPACE = frozenset(" \t\n\v\f\r")


def to_upper(text: str) -> str:
    """Uppercase ASCII letters, leave everything else alone."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Lowercase ASCII letters, leave everything else alone."""
    return text.translate(_TO_LOWER)


class UpperCaseFormatter(ITextFormatter):
    """
    Formatter converting every letter to uppercase.
    
    "tHiS iS a TeSt" -> "THIS IS A TEST"
    """
    
    def format(self, text: str) -> str:
        return to_upper(text)
    
    @property
    def name(self) -> str:
        return "Uppercase"


class LowerCaseFormatter(ITextFormatter):
    """
    Formatter converting every letter to lowercase.
    
    "tHiS iS a TeSt" -> "this is a test"
    """
    
    def format(self, text: str) -> str:
        return to_lower(text)
    
    @property
    def name(self) -> str:
        return "Lowercase"


class TitleCaseFormatter(ITextFormatter):
    """
    Formatter capitalizing the first character of each word.
    
    A word starts at position 0 or right after whitespace. The first
    character of a word is uppercased, every other character lowercased:
    
        "tHiS iS a TeSt" -> "This Is A Test"
        "McDonald"       -> "Mcdonald"
        "o'neil"         -> "O'neil"
    
    Punctuation does not start a new word, so "(hello)" stays "(hello)":
    the opening parenthesis consumes the word start.
    """
    
    def format(self, text: str) -> str:
        """
        Scan left to right with a single "at word start" flag.
        
        Args:
            text: Input text
        
        Returns:
            Title-cased text
        """
        result = []
        capitalize = True
        
        for char in text:
            if char in ASCII_WHITESPACE:
                capitalize = True
                result.append(char)
            elif capitalize:
                result.append(to_upper(char))
                capitalize = False
            else:
                result.append(to_lower(char))
        
        return "".join(result)
    
    @property
    def name(self) -> str:
        return "Title Case"
