"""Entry points: open a text source, then lex or parse it."""

from __future__ import annotations

import io
import os
from typing import IO, Union

from csslite.config import ParserConfig
from csslite.lexer.lexer import Lexer
from csslite.lexer.source import CharacterSource
from csslite.model.stylesheet import StyleSheet
from csslite.parser.core import Parser

__all__ = ["open_source", "tokenize", "tokenize_string", "parse", "parse_string"]

Source = Union[str, os.PathLike, IO[bytes], IO[str]]


def open_source(source: Source, config: ParserConfig | None = None) -> CharacterSource:
    """Wrap a path or an open stream in a :class:`CharacterSource`.

    Paths are opened in binary mode and closed by the source once it is
    exhausted. Streams are borrowed and left open. ``OSError`` from opening
    the path propagates.
    """
    config = config or ParserConfig()
    if isinstance(source, (str, os.PathLike)):
        return CharacterSource.from_path(source, config)
    return CharacterSource(source, encoding=config.encoding, errors=config.decode_errors)


def tokenize(source: Source, config: ParserConfig | None = None) -> Lexer:
    """Return a lexer positioned before the first token of *source*."""
    return Lexer(open_source(source, config))


def tokenize_string(css: str, config: ParserConfig | None = None) -> Lexer:
    return tokenize(io.StringIO(css), config)


def parse(source: Source, config: ParserConfig | None = None) -> StyleSheet:
    """Parse *source* into a StyleSheet.

    Recoverable problems are collected in the result. Only failures to open
    or read the input are raised.
    """
    with tokenize(source, config) as lexer:
        return Parser(lexer, config).parse()


def parse_string(css: str, config: ParserConfig | None = None) -> StyleSheet:
    return parse(io.StringIO(css), config)
