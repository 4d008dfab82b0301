"""
Protocols (interfaces) for logbrain components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod
from typing import List
from logbrain.models import Line

__all__ = [
    'MaskerProtocol',
    'TokenizerProtocol',
]


class MaskerProtocol(ABC):
    """Protocol for masking volatile substrings of a log line."""

    @abstractmethod
    def mask(self, log_line: str) -> str:
        """
        Replace every volatile substring with the wildcard marker.

        Args:
            log_line: Raw log string

        Returns:
            Masked log string
        """
        pass

    @property
    @abstractmethod
    def wildcard(self) -> str:
        """Return the marker substituted for masked substrings."""
        pass


class TokenizerProtocol(ABC):
    """Protocol for log tokenization."""

    @abstractmethod
    def tokenize(self, line_id: int, raw_line: str, masked_line: str) -> Line:
        """
        Split a masked log line into column-indexed tokens.

        Args:
            line_id: Position of the line in the raw input
            raw_line: Original, unmasked log string
            masked_line: Log string after masking

        Returns:
            Line whose tokens carry content and column (frequency unset)
        """
        pass
