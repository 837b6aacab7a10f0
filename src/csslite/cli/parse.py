"""CLI command: csslite parse -- print the rules of a CSS file."""

from __future__ import annotations

import sys

import click

from csslite.config import ParserConfig
from csslite.loader import parse as parse_stylesheet
from csslite.model.stylesheet import Rule


def _echo_rule(rule: Rule) -> None:
    click.echo("Selector list: [")
    for group in rule.selectors:
        click.echo(f"  Selector group: {group.specificity()} [")
        for selector in group:
            click.echo(f"    {selector}: {selector.specificity()}")
        click.echo("  ]")
    click.echo("]")

    click.echo("Properties: [")
    for prop in rule.properties:
        click.echo(f"  {prop}")
    click.echo("]")
    click.echo()


@click.command()
@click.argument("cssfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--encoding", default="utf-8", show_default=True, help="Encoding of CSSFILE.")
@click.option("--strict", is_flag=True, help="Exit with code 1 if any error was recorded.")
def parse(cssfile: str, encoding: str, strict: bool) -> None:
    """Parse a CSS file and print its rules, specificities and errors.

    Malformed input is reported but never stops the parse. Exits with code 1
    only if the file cannot be read, or with --strict when errors were found.
    """
    config = ParserConfig(encoding=encoding)

    try:
        sheet = parse_stylesheet(cssfile, config)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for rule in sheet.rules:
        _echo_rule(rule)

    if sheet.flagged or sheet.errors:
        click.echo("Errors:")
        for error in sheet.flagged:
            click.echo(f"  {error}")
        for error in sheet.errors:
            click.echo(f"  rule skipped: {error}")
        click.echo()

    error_count = len(sheet.flagged) + len(sheet.errors)
    click.echo(f"Summary: {len(sheet.rules)} rule(s), {error_count} error(s)")

    if strict and not sheet.ok:
        sys.exit(1)
