"""Exception types raised by logbrain."""


class LogBrainError(Exception):
    """Base class for all logbrain errors."""


class InvalidPatternError(LogBrainError, ValueError):
    """A masking pattern failed to compile as a regular expression."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid masking pattern {pattern!r}: {reason}")


class ConfigError(LogBrainError):
    """Parser settings are missing, malformed or out of range."""
