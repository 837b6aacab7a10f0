"""Tokenizer for the supported CSS subset.

Tokens are produced one at a time from a :class:`CharacterSource`, with one
token of lookahead: ``current_token()`` computes the token under the cursor
once and caches it, ``next_token()`` drops the cache and computes the next.

Lexical problems never raise. They come back as ``ERROR`` tokens carrying a
:class:`~csslite.errors.ParserError`, and the cursor always moves past the
offending input so the next call makes progress.
"""

from __future__ import annotations

import logging
import math
import string
from collections.abc import Callable, Iterator

from csslite.errors import InvalidNumber, ParserError, UnexpectedToken
from csslite.lexer.source import CharacterSource
from csslite.model.token import PUNCTUATION, Token, TokenKind

__all__ = ["Lexer"]

logger = logging.getLogger(__name__)

QUOTES = "\"'"


def is_whitespace(char: str | None) -> bool:
    return char is not None and char.isspace()


def is_digit(char: str | None) -> bool:
    return char is not None and char in string.digits


def is_name_start(char: str | None) -> bool:
    return char is not None and (char.isalpha() or char == "_")


def is_name_char(char: str | None) -> bool:
    return char is not None and (char.isalnum() or char in "-_")


def is_quote(char: str | None) -> bool:
    return char is not None and char in QUOTES


class Lexer:
    def __init__(self, source: CharacterSource) -> None:
        self.source = source
        self._current: Token | None = None  # None until computed
        self._produced = 0

    @classmethod
    def from_string(cls, css: str) -> Lexer:
        return cls(CharacterSource.from_string(css))

    @property
    def produced(self) -> int:
        """Number of tokens computed so far; identifies the current token."""
        return self._produced

    def current_token(self) -> Token:
        if self._current is None:
            self._current = self._extract_token()
            self._produced += 1
        return self._current

    def next_token(self) -> Token:
        self._current = None
        return self.current_token()

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens from the current one up to and including ``EOF``."""
        token = self.current_token()
        while True:
            yield token
            if token.is_eof:
                return
            token = self.next_token()

    def close(self) -> None:
        self.source.close()

    def __enter__(self) -> Lexer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # --- dispatch ------------------------------------------------------------

    def _extract_token(self) -> Token:
        char = self._skip_comments()
        if char is None:
            return Token.eof()

        if is_whitespace(char):
            return Token(TokenKind.WHITESPACE, self._extract_while(is_whitespace))

        if self._at_name_start():
            return self._extract_name_like()

        if char in PUNCTUATION:
            self.source.advance()
            return Token(PUNCTUATION[char], char)

        if is_quote(char):
            return self._extract_string(char)

        if is_digit(char):
            return self._extract_number()

        self.source.advance()
        return self._error(UnexpectedToken(found=char), char)

    def _error(self, error: ParserError, text: str) -> Token:
        logger.debug("Lexical error: %s", error)
        return Token.from_error(error, text)

    # --- predicates ----------------------------------------------------------

    def _at(self, text: str) -> bool:
        return all(self.source.peek_n(i) == c for i, c in enumerate(text))

    def _at_escape(self, offset: int = 0) -> bool:
        if self.source.peek_n(offset) != "\\":
            return False
        return self.source.peek_n(offset + 1) not in (None, "\n")

    def _at_name_start(self) -> bool:
        first = self.source.current()
        if is_name_start(first):
            return True
        if first != "-":
            return False
        second = self.source.peek()
        return is_name_start(second) or second == "-" or self._at_escape(1)

    # --- extraction ----------------------------------------------------------

    def _extract_while(self, predicate: Callable[[str | None], bool]) -> str:
        chars: list[str] = []
        char = self.source.current()
        while predicate(char):
            chars.append(char)  # type: ignore[arg-type]
            char = self.source.advance()
        return "".join(chars)

    def _skip_comments(self) -> str | None:
        while self._at("/*"):
            self.source.advance()
            self.source.advance()
            while not self._at("*/"):
                if self.source.advance() is None:
                    return None
            self.source.advance()
            self.source.advance()
        return self.source.current()

    def _skip_whitespace(self) -> None:
        self._extract_while(is_whitespace)

    def _extract_name(self) -> str:
        chars: list[str] = []
        while True:
            char = self.source.current()
            if is_name_char(char):
                chars.append(char)  # type: ignore[arg-type]
                self.source.advance()
            elif self._at_escape():
                chars.append("\\")
                chars.append(self.source.advance())  # type: ignore[arg-type]
                self.source.advance()
            else:
                return "".join(chars)

    def _extract_name_like(self) -> Token:
        name = self._extract_name()
        if self.source.current() != "(":
            return Token(TokenKind.IDENTIFIER, name)

        self.source.advance()
        if name.lower() != "url":
            return Token(TokenKind.FUNCTION, name)

        # Leave at most one whitespace character before deciding.
        while is_whitespace(self.source.current()) and is_whitespace(self.source.peek()):
            self.source.advance()
        current = self.source.current()
        if is_quote(current) or (is_whitespace(current) and is_quote(self.source.peek())):
            return Token(TokenKind.FUNCTION, name)
        return self._extract_url()

    def _extract_url(self) -> Token:
        self._skip_whitespace()
        chars: list[str] = []
        while True:
            char = self.source.current()
            if char is None:
                return Token(TokenKind.URL, "".join(chars))
            if char == ")":
                self.source.advance()
                return Token(TokenKind.URL, "".join(chars))
            if is_whitespace(char):
                self._skip_whitespace()
                after = self.source.current()
                if after is None:
                    return Token(TokenKind.URL, "".join(chars))
                if after == ")":
                    self.source.advance()
                    return Token(TokenKind.URL, "".join(chars))
                return self._extract_bad_url("".join(chars))
            if char in "\"'(":
                return self._extract_bad_url("".join(chars))
            if char == "\\":
                if not self._at_escape():
                    return self._extract_bad_url("".join(chars))
                chars.append(char)
                chars.append(self.source.advance())  # type: ignore[arg-type]
                self.source.advance()
                continue
            chars.append(char)
            self.source.advance()

    def _extract_bad_url(self, collected: str) -> Token:
        while True:
            char = self.source.current()
            if char is None:
                break
            if char == ")":
                self.source.advance()
                break
            if self._at_escape():
                self.source.advance()
            self.source.advance()
        return Token(TokenKind.BAD_URL, collected)

    def _extract_string(self, delimiter: str) -> Token:
        self.source.advance()
        chars: list[str] = []
        while True:
            char = self.source.current()
            if char is None:
                return self._error(
                    UnexpectedToken(found="EOF", expected=delimiter), delimiter + "".join(chars)
                )
            if char == delimiter:
                self.source.advance()
                return Token(TokenKind.STRING, "".join(chars))
            if char == "\n":
                return self._error(
                    UnexpectedToken(found="\\n", expected=delimiter), delimiter + "".join(chars)
                )
            if char == "\\" and self.source.peek() is not None:
                chars.append(char)
                chars.append(self.source.advance())  # type: ignore[arg-type]
            else:
                chars.append(char)
            self.source.advance()

    def _extract_number(self) -> Token:
        digits = self._extract_while(is_digit)

        if self.source.current() == "." and is_digit(self.source.peek()):
            self.source.advance()
            text = f"{digits}.{self._extract_while(is_digit)}"
            value = float(text)
            if math.isinf(value):
                return self._error(InvalidNumber(f"{text} is out of range"), text)
            return Token(TokenKind.FLOAT, text, value)

        try:
            return Token(TokenKind.INTEGER, digits, int(digits))
        except ValueError as exc:
            return self._error(InvalidNumber(str(exc)), digits)
