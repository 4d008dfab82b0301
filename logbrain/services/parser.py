"""
Brain log parser: mine templates from a batch of raw log lines

Pipeline:
1. Mask volatile substrings (ordered regex patterns)
2. Tokenize on whitespace and bucket lines by token count
3. Count tokens per column within each length group
4. Pick each line's root columns and group lines by signature

Everything is one synchronous batch over an in-memory list; nothing is
kept between calls.
"""

import logging
from typing import Dict, List, Sequence

from logbrain.config import DEFAULT_WEIGHT, ParserSettings, validate_weight
from logbrain.context.extraction import FrequencyVectorizer, TemplateGrouper
from logbrain.context.masking import RegexMasker, WILDCARD
from logbrain.context.tokenization import LengthGrouper, WhitespaceTokenizer
from logbrain.models import LengthGroup, Template

logger = logging.getLogger(__name__)

# length -> signature -> template
ParseResult = Dict[int, Dict[str, Template]]


class BrainParser:
    """
    Facade over the masking, grouping, vectorizing and root selection stages

    Construction compiles every pattern; an invalid one raises
    InvalidPatternError before any line is looked at.
    """

    def __init__(self, patterns: Sequence[str], weight: float = DEFAULT_WEIGHT,
                 wildcard: str = WILDCARD):
        """
        Args:
            patterns: Masking regexes, applied in order
            weight: Threshold fraction w in [0, 1]
            wildcard: Marker used for masked substrings and non-root columns

        Raises:
            InvalidPatternError: if a pattern does not compile
            ConfigError: if weight is outside [0, 1]
        """
        self.weight = validate_weight(weight)
        self.masker = RegexMasker(patterns, wildcard=wildcard)
        self.tokenizer = WhitespaceTokenizer()
        self.grouper = LengthGrouper()
        self.vectorizer = FrequencyVectorizer()
        self.template_grouper = TemplateGrouper(self.weight, wildcard=wildcard)

    @classmethod
    def from_settings(cls, settings: ParserSettings) -> 'BrainParser':
        return cls(settings.patterns, weight=settings.weight, wildcard=settings.wildcard)

    @property
    def wildcard(self) -> str:
        return self.masker.wildcard

    def preprocess(self, log_line: str) -> str:
        """Mask a single raw log line"""
        return self.masker.mask(log_line)

    def vectorize(self, raw_logs: Sequence[str]) -> Dict[int, LengthGroup]:
        """
        Mask, tokenize, group by length and count

        Args:
            raw_logs: Raw log lines in input order

        Returns:
            Dict of token count -> vectorized LengthGroup, in first-encounter
            order
        """
        lines = [
            self.tokenizer.tokenize(line_id, raw, self.preprocess(raw))
            for line_id, raw in enumerate(raw_logs)
        ]
        groups = self.grouper.group(lines)
        self.vectorizer.vectorize_all(groups.values())

        logger.info("Vectorized %d lines into %d length groups", len(lines), len(groups))
        return groups

    def group_templates(self, group: LengthGroup) -> Dict[str, Template]:
        """Root selection and signature grouping for one vectorized group"""
        return self.template_grouper.group(group)

    def parse(self, raw_logs: Sequence[str]) -> ParseResult:
        """
        Run the full pipeline

        Returns:
            Dict of token count -> (signature -> Template)
        """
        groups = self.vectorize(raw_logs)
        result = {length: self.group_templates(group) for length, group in groups.items()}

        logger.info("Mined %d templates from %d lines",
                    sum(len(templates) for templates in result.values()), len(raw_logs))
        return result

    @staticmethod
    def templates(result: ParseResult) -> List[Template]:
        """Flatten a parse result, length groups first, then signatures"""
        return [template for templates in result.values() for template in templates.values()]

    def summary(self, result: ParseResult, top: int = 10) -> Dict:
        """Get summary statistics of mined templates"""
        templates = self.templates(result)
        line_count = sum(t.size for t in templates)

        # sorted() is stable, so equal sizes keep first-appearance order
        ranked = sorted(templates, key=lambda t: t.size, reverse=True)

        return {
            'length_groups': len(result),
            'template_count': len(templates),
            'line_count': line_count,
            'top_templates': [
                {
                    'signature': t.signature,
                    'length': len(t.lines[0].tokens),
                    'size': t.size,
                    'root_frequency': t.root_frequency,
                    'coverage': t.size / line_count if line_count > 0 else 0,
                }
                for t in ranked[:top]
            ]
        }


def parse_logs(raw_logs: Sequence[str], patterns: Sequence[str],
               weight: float = DEFAULT_WEIGHT) -> ParseResult:
    """One-shot helper: build a parser and run it over ``raw_logs``"""
    return BrainParser(patterns, weight=weight).parse(raw_logs)


# Example usage
if __name__ == "__main__":
    raw_logs = [
        "blk_101 info: Block 101 received from 10.0.0.1",
        "blk_102 info: Block 102 received from 10.0.0.2",
        "blk_103 warn: Connection refused",
    ]
    patterns = [
        r'blk_\d+',               # Block ID
        r'\d+\.\d+\.\d+\.\d+',    # IP address
        r'\d+',                   # Single numbers
    ]

    parser = BrainParser(patterns, weight=0.5)
    for length, templates in parser.parse(raw_logs).items():
        print(f"\nLength {length}:")
        for template in templates.values():
            print(f"  {template}")
            print(f"    lines: {template.line_ids}")
