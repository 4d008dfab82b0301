"""
Tokenization context for log parsing.
"""

from logbrain.context.tokenization.tokenizer import WhitespaceTokenizer, LengthGrouper

# Provide consistent naming
Tokenizer = WhitespaceTokenizer

__all__ = ['WhitespaceTokenizer', 'Tokenizer', 'LengthGrouper']
