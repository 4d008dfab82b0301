"""
Command line interface for LogBrain.
"""

from logbrain.cli.commands import parse, vectorize

__all__ = ['parse', 'vectorize']
