"""
Parser settings

Settings are a flat JSON object; any key left out keeps its default.

Example settings file:
    {
        "weight": 0.5,
        "patterns": ["blk_\\\\d+", "\\\\d+\\\\.\\\\d+\\\\.\\\\d+\\\\.\\\\d+", "\\\\d+"],
        "wildcard": "<*>"
    }
"""

import json
from dataclasses import dataclass, asdict, field as dataclass_field, fields
from pathlib import Path
from typing import Dict, List, Union

from logbrain.context.masking import WILDCARD
from logbrain.exceptions import ConfigError

# Compound tokens first, bare numbers last
DEFAULT_PATTERNS = [
    r'blk_-?\d+',              # HDFS block id
    r'\d+\.\d+\.\d+\.\d+',     # IPv4 address
    r'\d+',                    # Plain numbers
]

DEFAULT_WEIGHT = 0.5


def validate_weight(weight: float) -> float:
    if isinstance(weight, bool) or not isinstance(weight, (int, float)):
        raise ConfigError(f"weight must be a number, got {weight!r}")
    if not 0.0 <= weight <= 1.0:
        raise ConfigError(f"weight must be between 0 and 1, got {weight}")
    return float(weight)


@dataclass
class ParserSettings:
    """Tuning knobs for one parser run"""
    weight: float = DEFAULT_WEIGHT
    patterns: List[str] = dataclass_field(default_factory=lambda: list(DEFAULT_PATTERNS))
    wildcard: str = WILDCARD
    skip_blank: bool = False

    def __post_init__(self):
        self.weight = validate_weight(self.weight)
        if (not isinstance(self.patterns, (list, tuple))
                or not all(isinstance(p, str) for p in self.patterns)):
            raise ConfigError("patterns must be a list of strings")
        self.patterns = list(self.patterns)
        if not isinstance(self.wildcard, str) or not self.wildcard:
            raise ConfigError("wildcard must be a non-empty string")
        if not isinstance(self.skip_blank, bool):
            raise ConfigError(f"skip_blank must be true or false, got {self.skip_blank!r}")

    def to_dict(self) -> Dict:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict) -> 'ParserSettings':
        known = {f.name for f in fields(ParserSettings)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown settings: {', '.join(unknown)}")
        return ParserSettings(**data)


def load_settings(path: Union[str, Path]) -> ParserSettings:
    """
    Load settings from a JSON file, merged over the defaults

    Raises:
        ConfigError: if the file is missing, not a JSON object, or holds
            unknown keys or invalid values
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Settings file {path} is not valid JSON: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must contain a JSON object")

    return ParserSettings.from_dict(data)
