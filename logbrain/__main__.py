"""
Entry point for python -m logbrain
"""

import click
from logbrain import __version__
from logbrain.cli import parse, vectorize

@click.group()
@click.version_option(version=__version__)
def cli():
    """LogBrain - Brain-style log template mining"""
    pass

cli.add_command(parse)
cli.add_command(vectorize)

if __name__ == '__main__':
    cli()
