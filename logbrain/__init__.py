"""
LogBrain - Log template mining with the Brain algorithm

Masks volatile substrings, groups lines by token count, and inside each
group picks the stable "root" words of every line to form templates.

Architecture:
- Models: Pure data structures (Token, Line, LengthGroup, Template)
- Protocols: Interface contracts (MaskerProtocol, TokenizerProtocol)
- Context: Domain implementations (Masking, Tokenization, Extraction)
- Services: Application orchestration (BrainParser)
- CLI: User interface (parse, vectorize commands)
"""

__version__ = "1.0.0"
__license__ = "MIT"

from logbrain import models, protocols
from logbrain.config import ParserSettings, load_settings
from logbrain.context import (
    RegexMasker,
    WhitespaceTokenizer,
    LengthGrouper,
    FrequencyVectorizer,
    RootSelector,
    TemplateGrouper,
)
from logbrain.exceptions import LogBrainError, InvalidPatternError, ConfigError
from logbrain.services import BrainParser, Parser, parse_logs

__all__ = [
    'models',
    'protocols',
    'ParserSettings',
    'load_settings',
    'RegexMasker',
    'WhitespaceTokenizer',
    'LengthGrouper',
    'FrequencyVectorizer',
    'RootSelector',
    'TemplateGrouper',
    'LogBrainError',
    'InvalidPatternError',
    'ConfigError',
    'BrainParser',
    'Parser',
    'parse_logs',
]
