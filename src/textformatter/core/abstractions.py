"""
Abstractions for Text Formatting

Defines the interface every text formatting strategy implements.
The TextProcessor context depends on this abstraction only, never on a
concrete formatter.
"""

from abc import ABC, abstractmethod


class ITextFormatter(ABC):
    """
    Abstract interface for text formatters.
    
    Single Responsibility: Transform one string into another.
    
    Open/Closed Principle: New formats can be added without modifying
    the TextProcessor context.
    
    Implementations must be pure and total: defined for every string
    (including the empty string), no side effects, no exceptions.
    """
    
    @abstractmethod
    def format(self, text: str) -> str:
        """
        Transform text.
        
        Args:
            text: Input text, possibly empty
        
        Returns:
            Transformed text of the same length
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Formatter identifier, shown in the selection menu."""
        pass
    
    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
