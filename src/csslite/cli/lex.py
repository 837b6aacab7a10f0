"""CLI command: csslite lex -- print the token stream of a CSS file."""

from __future__ import annotations

import sys

import click

from csslite.config import ParserConfig
from csslite.loader import tokenize


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default="utf-8", show_default=True, help="Encoding of CSSFILE.")
def lex(cssfile: str, encoding: str) -> None:
    """Tokenize a CSS file and print one token per line, ending with EOF."""
    config = ParserConfig(encoding=encoding)

    try:
        with tokenize(cssfile, config) as lexer:
            for token in lexer:
                click.echo(repr(token))
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
