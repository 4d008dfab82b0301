"""
CLI commands for LogBrain.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from logbrain.config import ParserSettings, load_settings
from logbrain.exceptions import LogBrainError
from logbrain.services import BrainParser

console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def resolve_settings(config: Optional[str], patterns: Tuple[str, ...],
                     weight: Optional[float]) -> ParserSettings:
    """Config file (or defaults), then command-line overrides"""
    settings = load_settings(config) if config else ParserSettings()
    if patterns:
        settings.patterns = list(patterns)
    if weight is not None:
        settings = ParserSettings.from_dict({**settings.to_dict(), 'weight': weight})
    return settings


def read_logs(input_path: Path, skip_blank: bool) -> List[str]:
    with open(input_path, 'r', encoding='utf-8', errors='ignore') as f:
        logs = [line.rstrip('\r\n') for line in f]
    if skip_blank:
        logs = [line for line in logs if line.strip()]
    return logs


def build_parser(input: str, config: Optional[str], patterns: Tuple[str, ...],
                 weight: Optional[float]) -> Tuple[BrainParser, List[str]]:
    input_path = Path(input)
    if not input_path.exists():
        click.echo(f"Error: Input file not found: {input}", err=True)
        sys.exit(1)

    try:
        settings = resolve_settings(config, patterns, weight)
        parser = BrainParser.from_settings(settings)
    except LogBrainError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    return parser, read_logs(input_path, settings.skip_blank)


@click.command()
@click.option('--input', '-i', required=True, help='Input log file path')
@click.option('--pattern', '-p', 'patterns', multiple=True,
              help='Masking regex, repeatable, applied in the given order')
@click.option('--weight', '-w', type=float, default=None, help='Root threshold fraction in [0, 1]')
@click.option('--config', '-c', default=None, help='JSON settings file')
@click.option('--limit', type=int, default=5, help='Max member line ids shown per template (default: 5)')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def parse(input, patterns, weight, config, limit, verbose):
    """
    Mine log templates from a log file.

    Example:
        logbrain parse -i logs/hdfs.log -p 'blk_\\d+' -p '\\d+' -w 0.5
    """
    configure_logging(verbose)
    parser, logs = build_parser(input, config, patterns, weight)

    click.echo(f"Processing {len(logs)} log entries...")
    result = parser.parse(logs)

    for length, templates in result.items():
        click.echo(f"\n=== Length {length}: {len(templates)} templates ===")
        for template in templates.values():
            ids = ', '.join(str(i) for i in template.line_ids[:limit])
            more = ', ...' if template.size > limit else ''
            click.echo(f"[{template.size:>5}] (freq={template.root_frequency}) {template.signature}")
            click.echo(f"        lines: {ids}{more}")

    summary = parser.summary(result)
    click.echo(f"\n✓ {summary['template_count']} templates in "
               f"{summary['length_groups']} length groups")


@click.command()
@click.option('--input', '-i', required=True, help='Input log file path')
@click.option('--pattern', '-p', 'patterns', multiple=True,
              help='Masking regex, repeatable, applied in the given order')
@click.option('--config', '-c', default=None, help='JSON settings file')
@click.option('--verbose', '-v', is_flag=True, help='Show debug logging')
def vectorize(input, patterns, config, verbose):
    """
    Show per-column token counts for every length group.

    Example:
        logbrain vectorize -i logs/hdfs.log -p '\\d+'
    """
    configure_logging(verbose)
    parser, logs = build_parser(input, config, patterns, None)

    for length, group in parser.vectorize(logs).items():
        table = Table(title=f"Length {length} ({group.size} lines)")
        table.add_column("Column", justify="right")
        table.add_column("Token")
        table.add_column("Count", justify="right")

        for column, counts in group.column_counts.items():
            for content, count in sorted(counts.items(), key=lambda item: -item[1]):
                table.add_row(str(column), content, str(count))

        console.print(table)


if __name__ == '__main__':
    parse()
