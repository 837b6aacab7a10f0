"""Token model: the lexical categories produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from csslite.errors import ParserError


class TokenKind(Enum):
    """Lexical category of a token."""

    IDENTIFIER = "identifier"
    FUNCTION = "function"
    URL = "url"
    BAD_URL = "bad-url"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    WHITESPACE = "whitespace"

    COMMA = ","
    COLON = ":"
    SEMICOLON = ";"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    SINGLE_QUOTE = "'"
    DOUBLE_QUOTE = '"'

    EOF = "EOF"
    ERROR = "error"


# Characters that always lex as a one-character token. Quote marks have their
# own kinds but the lexer reads them as string delimiters.
PUNCTUATION: dict[str, TokenKind] = {
    ",": TokenKind.COMMA,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMICOLON,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "[": TokenKind.LEFT_BRACKET,
    "]": TokenKind.RIGHT_BRACKET,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}

CLOSING = frozenset({TokenKind.RIGHT_BRACE, TokenKind.RIGHT_BRACKET, TokenKind.RIGHT_PAREN})


@dataclass(frozen=True)
class Token:
    """A single lexical token.

    Attributes:
        kind: The token's category.
        text: Exact source text consumed. For strings and urls this is the
            content between the delimiters; for functions the name without
            ``(``; for ``ERROR`` the input consumed while failing; empty for
            ``EOF``.
        value: Parsed number for ``INTEGER`` and ``FLOAT`` tokens.
        error: The error carried by an ``ERROR`` token.
    """

    kind: TokenKind
    text: str = ""
    value: int | float | None = None
    error: ParserError | None = None

    @classmethod
    def eof(cls) -> Token:
        return cls(TokenKind.EOF)

    @classmethod
    def from_error(cls, error: ParserError, text: str = "") -> Token:
        return cls(TokenKind.ERROR, text, error=error)

    @property
    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF

    @property
    def is_whitespace(self) -> bool:
        return self.kind is TokenKind.WHITESPACE

    @property
    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return "EOF"
        if self.kind is TokenKind.ERROR:
            return self.text or str(self.error)
        if self.kind is TokenKind.FUNCTION:
            return f"{self.text}("
        if self.kind is TokenKind.URL:
            return f"url({self.text})"
        if self.kind is TokenKind.STRING:
            return repr(self.text)
        return self.text

    def __repr__(self) -> str:
        if self.kind is TokenKind.EOF:
            return "EOF"
        name = self.kind.name.title().replace("_", "")
        if self.kind is TokenKind.ERROR:
            return f"{name}({self.error!r})"
        if self.value is not None:
            return f"{name}({self.value!r})"
        return f"{name}({self.text!r})"
