"""
Context layer - domain-specific implementations.
"""

from logbrain.context.masking import RegexMasker, Masker, WILDCARD
from logbrain.context.tokenization import WhitespaceTokenizer, Tokenizer, LengthGrouper
from logbrain.context.extraction import FrequencyVectorizer, RootSelector, TemplateGrouper

__all__ = [
    'RegexMasker',
    'Masker',
    'WILDCARD',
    'WhitespaceTokenizer',
    'Tokenizer',
    'LengthGrouper',
    'FrequencyVectorizer',
    'RootSelector',
    'TemplateGrouper',
]
