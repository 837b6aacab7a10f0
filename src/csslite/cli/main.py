"""csslite CLI entry point: Click group with subcommands."""

import logging

import click

from csslite import __version__


@click.group()
@click.version_option(version=__version__, prog_name="csslite")
@click.option("-v", "--verbose", is_flag=True, help="Log lexer and parser activity.")
def cli(verbose: bool) -> None:
    """csslite - tokenize and parse a small subset of CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from csslite.cli.lex import lex  # noqa: E402
from csslite.cli.parse import parse  # noqa: E402

cli.add_command(lex)
cli.add_command(parse)
