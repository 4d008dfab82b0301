"""
Extraction context: frequency vectors and template discovery.
"""

from logbrain.context.extraction.frequency import FrequencyVectorizer
from logbrain.context.extraction.root_selector import (
    RootSelector,
    RootSelection,
    TemplateGrouper,
    round_half_away,
)

__all__ = [
    'FrequencyVectorizer',
    'RootSelector',
    'RootSelection',
    'TemplateGrouper',
    'round_half_away',
]
