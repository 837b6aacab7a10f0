"""TokenCursor protocol: what sub-parsers may do with the parser core."""

from __future__ import annotations

from typing import Protocol

from csslite.errors import ParserError
from csslite.model.token import Token, TokenKind


class TokenCursor(Protocol):
    """Token access and error reporting handed to sub-parsers."""

    def current_token(self, skip_whitespace: bool = False) -> Token: ...

    def advance_token(self, skip_whitespace: bool = False) -> Token: ...

    def flag_error(self, error: ParserError) -> None: ...


# Tokens that can never begin a selector.
NON_SELECTOR_KINDS = frozenset(
    {
        TokenKind.LEFT_BRACE,
        TokenKind.RIGHT_BRACE,
        TokenKind.LEFT_BRACKET,
        TokenKind.RIGHT_BRACKET,
        TokenKind.LEFT_PAREN,
        TokenKind.RIGHT_PAREN,
        TokenKind.EOF,
    }
)


def is_selector_start(token: Token) -> bool:
    return token.kind not in NON_SELECTOR_KINDS
