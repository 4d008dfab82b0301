"""
Services layer - application orchestration.
"""

from logbrain.services.parser import BrainParser, ParseResult, parse_logs

# Provide consistent naming
Parser = BrainParser

__all__ = [
    'BrainParser',
    'ParseResult',
    'parse_logs',
    # Aliases
    'Parser',
]
