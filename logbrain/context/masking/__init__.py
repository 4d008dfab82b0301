"""
Masking context for log preprocessing.
"""

from logbrain.context.masking.masker import RegexMasker, WILDCARD
from logbrain.exceptions import InvalidPatternError

# Provide consistent naming
Masker = RegexMasker

__all__ = ['RegexMasker', 'Masker', 'WILDCARD', 'InvalidPatternError']
