"""
Frequency Vectorizer: per-column token counts within a length group

Two passes per group:
1. Count, for every column, how many lines carry each distinct token there
2. Back-fill every token's frequency from that table

A token's frequency is a property of the whole group, so nothing is
assigned until the first pass has seen every line.

Example:
    "<*> info: Block <*>"
    "<*> info: Block <*>"
    "<*> warn: Block <*>"

    column 1 -> {'info:': 2, 'warn:': 1}
    frequency vectors -> [3, 2, 3, 3], [3, 2, 3, 3], [3, 1, 3, 3]
"""

import logging
from collections import Counter, defaultdict
from typing import Dict, Iterable

from logbrain.models import LengthGroup

logger = logging.getLogger(__name__)


class FrequencyVectorizer:
    """Build column -> content -> count tables and assign token frequencies"""

    def vectorize(self, group: LengthGroup) -> LengthGroup:
        """
        Count one length group and back-fill its token frequencies in place

        Args:
            group: Length group whose lines are already tokenized

        Returns:
            The same group, with column_counts filled in
        """
        # Pass 1: count every (column, content) pair
        counts: Dict[int, Counter] = defaultdict(Counter)
        for line in group.lines:
            for token in line.tokens:
                counts[token.column][token.content] += 1

        group.column_counts = {column: counts[column] for column in sorted(counts)}

        # Pass 2: look every token up in the finished table
        for line in group.lines:
            for token in line.tokens:
                token.frequency = group.column_counts[token.column][token.content]

        logger.debug("Vectorized length-%d group: %d lines, %d columns",
                     group.length, group.size, len(group.column_counts))
        return group

    def vectorize_all(self, groups: Iterable[LengthGroup]) -> None:
        for group in groups:
            self.vectorize(group)
