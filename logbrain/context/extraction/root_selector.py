"""
Root Selector / Template Grouper: pick the stable columns of each line

For every line of a length group:
1. Partition its columns by token frequency (frequency -> [columns])
2. threshold = round(w * max frequency), rounding halves away from zero
3. Among frequencies >= threshold, the root set is the longest column
   list; equal lengths go to the larger frequency
4. If no frequency reaches the threshold, the same choice is made over
   all frequencies, so a root set always exists
5. The signature shows root columns literally and every other column as
   the wildcard; lines sharing a signature form one template

Example (w = 0.5, group of four masked lines):
    "User <*> login"       frequencies [2, 3, 2] -> "User <*> login"
    "User <*> login"       frequencies [2, 3, 2] -> "User <*> login"
    "System failure disk"  frequencies [1, 1, 1] -> "System failure disk"
    "Other <*> logout"     frequencies [1, 3, 1] -> "<*> <*> <*>"
"""

import logging
import math
from collections import defaultdict
from dataclasses import dataclass, field as dataclass_field
from typing import Dict, List

from logbrain.context.masking import WILDCARD
from logbrain.models import Line, LengthGroup, Template

logger = logging.getLogger(__name__)


@dataclass
class RootSelection:
    """Root columns chosen for one line and the frequency that won"""
    frequency: int
    columns: List[int] = dataclass_field(default_factory=list)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3)"""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


class RootSelector:
    """
    Per-line longest-common-pattern selection

    Works purely on the frequencies already back-filled into each token,
    so the group must be vectorized first.
    """

    def __init__(self, weight: float, wildcard: str = WILDCARD):
        """
        Args:
            weight: Fraction w in [0, 1] of the line's highest frequency a
                candidate frequency must reach
            wildcard: Marker printed for non-root columns
        """
        self.weight = weight
        self.wildcard = wildcard

    def threshold(self, max_frequency: int) -> int:
        return round_half_away(self.weight * max_frequency)

    def select(self, line: Line) -> RootSelection:
        """Choose the root column set of a single line"""
        partitions: Dict[int, List[int]] = defaultdict(list)
        max_frequency = 0
        for token in line.tokens:
            partitions[token.frequency].append(token.column)
            max_frequency = max(max_frequency, token.frequency)

        if not partitions:
            # Zero-token line: nothing to choose from
            return RootSelection(frequency=0)

        threshold = self.threshold(max_frequency)
        candidates = {freq: cols for freq, cols in partitions.items() if freq >= threshold}
        if not candidates:
            candidates = partitions

        best = max(candidates, key=lambda freq: (len(candidates[freq]), freq))
        return RootSelection(frequency=best, columns=list(candidates[best]))

    def signature(self, line: Line, selection: RootSelection) -> str:
        roots = set(selection.columns)
        return ' '.join(
            token.content if token.column in roots else self.wildcard
            for token in line.tokens
        )


class TemplateGrouper:
    """Group the lines of a length group by their root signature"""

    def __init__(self, weight: float, wildcard: str = WILDCARD):
        self.selector = RootSelector(weight, wildcard)

    def group(self, group: LengthGroup) -> Dict[str, Template]:
        """
        Args:
            group: A vectorized length group

        Returns:
            Dict of signature -> Template, in first-occurrence order; members
            keep input order
        """
        templates: Dict[str, Template] = {}

        for line in group.lines:
            selection = self.selector.select(line)
            signature = self.selector.signature(line, selection)

            template = templates.get(signature)
            if template is None:
                template = Template(
                    signature=signature,
                    root_frequency=selection.frequency,
                    root_columns=selection.columns,
                    wildcard=self.selector.wildcard,
                )
                templates[signature] = template
            template.lines.append(line)

        logger.debug("Length-%d group: %d lines -> %d templates",
                     group.length, group.size, len(templates))
        return templates
