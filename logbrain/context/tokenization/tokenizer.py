"""
Tokenizer: whitespace tokenization and grouping by token count

Lines of different length can never share a template, so every later
stage works on one length group at a time.
"""

import logging
from typing import Dict, Iterable, Tuple

from logbrain.models import Token, Line, LengthGroup
from logbrain.protocols import TokenizerProtocol

logger = logging.getLogger(__name__)


class WhitespaceTokenizer(TokenizerProtocol):
    """Split masked lines on runs of whitespace (unicode aware)"""

    def tokenize(self, line_id: int, raw_line: str, masked_line: str) -> Line:
        # str.split() drops leading/trailing whitespace and never yields ''
        tokens = [
            Token(content=content, column=idx)
            for idx, content in enumerate(masked_line.split())
        ]
        return Line(line_id=line_id, raw=raw_line, tokens=tokens)


class LengthGrouper:
    """
    Bucket tokenized lines by token count

    Groups are created on first encounter of a length and keep their lines
    in input order. A line with zero tokens forms the length-0 group.
    """

    def group(self, lines: Iterable[Line]) -> Dict[int, LengthGroup]:
        """
        Args:
            lines: Tokenized lines in input order

        Returns:
            Dict of token count -> LengthGroup, in first-encounter order
        """
        groups: Dict[int, LengthGroup] = {}

        for line in lines:
            group = groups.get(line.length)
            if group is None:
                group = LengthGroup(length=line.length)
                groups[line.length] = group
            group.lines.append(line)

        logger.debug("Grouped lines into %d length groups: %s",
                     len(groups), self._sizes(groups))
        return groups

    @staticmethod
    def _sizes(groups: Dict[int, LengthGroup]) -> Tuple[Tuple[int, int], ...]:
        return tuple((length, group.size) for length, group in groups.items())
