"""
Masker: replace volatile substrings of log lines with a wildcard marker

Patterns are applied in the order given, each one rewriting the output of
the previous one. Order is the caller's responsibility: a pattern for a
compound token must come before a more general pattern that would
otherwise eat part of it.

Example:
    Patterns (in order): blk_\\d+, \\d+\\.\\d+\\.\\d+\\.\\d+, \\d+

    "blk_101 info: Block 101 received from 10.0.0.1"
        -> "<*> info: Block <*> received from <*>"

    With \\d+ first, the same line becomes
        "blk_<*> info: Block <*> received from <*>.<*>.<*>.<*>"
"""

import logging
from typing import List, Sequence

import regex  # Advanced regex with Unicode support

from logbrain.exceptions import InvalidPatternError
from logbrain.protocols import MaskerProtocol

logger = logging.getLogger(__name__)

WILDCARD = "<*>"


class RegexMasker(MaskerProtocol):
    """
    Ordered list of compiled patterns sharing one "replace all matches"
    contract

    All patterns are compiled up front; a single bad pattern aborts
    construction with InvalidPatternError so no line is ever processed
    with a partial pattern list.
    """

    def __init__(self, patterns: Sequence[str], wildcard: str = WILDCARD):
        """
        Args:
            patterns: Regular expression strings, applied in list order
            wildcard: Marker substituted for every match

        Raises:
            InvalidPatternError: if any pattern does not compile
        """
        self._wildcard = wildcard
        self.patterns: List[str] = list(patterns)
        self.compiled = []

        for pattern in self.patterns:
            try:
                self.compiled.append(regex.compile(pattern))
            except regex.error as exc:
                raise InvalidPatternError(pattern, str(exc)) from exc

        logger.debug("Compiled %d masking patterns", len(self.compiled))

    @property
    def wildcard(self) -> str:
        return self._wildcard

    def mask(self, log_line: str) -> str:
        # Lambda replacement keeps the wildcard literal (no backslash escapes)
        for compiled in self.compiled:
            log_line = compiled.sub(lambda _match: self._wildcard, log_line)
        return log_line
