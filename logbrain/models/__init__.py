"""
Data models for LogBrain.

This module contains pure data structures with no business logic.
"""

from dataclasses import dataclass, field as dataclass_field
from typing import List, Dict

__all__ = [
    'Token',
    'Line',
    'LengthGroup',
    'Template',
]


@dataclass
class Token:
    """A whitespace-delimited unit of a masked log line."""
    content: str
    column: int
    frequency: int = 0  # back-filled once the whole length group is counted


@dataclass
class Line:
    """One raw log line after masking and tokenization."""
    line_id: int
    raw: str
    tokens: List[Token] = dataclass_field(default_factory=list)

    @property
    def length(self) -> int:
        return len(self.tokens)

    @property
    def contents(self) -> List[str]:
        return [token.content for token in self.tokens]

    @property
    def frequencies(self) -> List[int]:
        """Frequency vector of this line, one entry per column."""
        return [token.frequency for token in self.tokens]


@dataclass
class LengthGroup:
    """All lines sharing one token count, plus their per-column counts."""
    length: int
    lines: List[Line] = dataclass_field(default_factory=list)
    # column -> token content -> number of lines carrying it there
    column_counts: Dict[int, Dict[str, int]] = dataclass_field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.lines)

    def count(self, column: int, content: str) -> int:
        return self.column_counts.get(column, {}).get(content, 0)


@dataclass
class Template:
    """A mined log template: signature, supporting frequency and members."""
    signature: str
    root_frequency: int
    root_columns: List[int] = dataclass_field(default_factory=list)  # of the first member
    lines: List[Line] = dataclass_field(default_factory=list)
    wildcard: str = "<*>"

    def __repr__(self):
        return f"Template('{self.signature[:40]}', size={self.size}, freq={self.root_frequency})"

    @property
    def size(self) -> int:
        return len(self.lines)

    @property
    def line_ids(self) -> List[int]:
        return [line.line_id for line in self.lines]

    @property
    def wildcard_columns(self) -> List[int]:
        """Columns shown as the wildcard in the signature"""
        return [idx for idx, part in enumerate(self.signature.split()) if part == self.wildcard]

    def parameters(self, line: Line) -> List[str]:
        """
        Contents of ``line`` at the signature's wildcard columns, in column order

        Members may reach the same signature through different root sets
        (a root column holding a masked token reads as the wildcard), so
        positions come from the shared signature, not any one root set.
        """
        columns = set(self.wildcard_columns)
        return [token.content for token in line.tokens if token.column in columns]
