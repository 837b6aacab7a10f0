"""Declaration block parser.

Grammar::

    declaration-block := '{' (declaration ';'?)* '}'
    declaration       := identifier ':' value

Each loop iteration either consumes at least one token or ends the block,
so malformed input cannot stall the parser.
"""

from __future__ import annotations

from csslite.config import ParserConfig
from csslite.errors import ParserError, UnexpectedEndOfInput, UnexpectedToken
from csslite.model.stylesheet import DataType, Keyword, Property
from csslite.model.token import TokenKind
from csslite.parser.cursor import TokenCursor

CONTEXT = "property"

# Value tokens that are left in place when the value is not understood.
_VALUE_END = frozenset({TokenKind.SEMICOLON, TokenKind.RIGHT_BRACE, TokenKind.EOF})


class PropertyParser:
    def __init__(self, cursor: TokenCursor, config: ParserConfig | None = None) -> None:
        self.cursor = cursor
        self.config = config or ParserConfig()

    def parse(self) -> list[Property] | ParserError:
        """Parse one declaration block, consuming its closing ``}``.

        Returns ``UnexpectedEndOfInput`` when the input ends before the block
        is closed.
        """
        current = self.cursor.current_token(True)
        if current.kind is TokenKind.LEFT_BRACE:
            self.cursor.advance_token(True)
        elif current.is_eof:
            return UnexpectedEndOfInput()
        else:
            self.cursor.flag_error(UnexpectedToken(found=str(current), expected="{"))

        properties: list[Property] = []
        while True:
            current = self.cursor.current_token(True)
            if current.kind is TokenKind.RIGHT_BRACE:
                self.cursor.advance_token(True)
                return properties
            if current.is_eof:
                return UnexpectedEndOfInput()
            if current.kind is not TokenKind.IDENTIFIER:
                self.cursor.flag_error(
                    UnexpectedToken(found=str(current), expected="identifier", context=CONTEXT)
                )
                self.cursor.advance_token(True)
                continue

            name = current.text
            after = self.cursor.advance_token(True)
            if after.kind is TokenKind.COLON:
                self.cursor.advance_token(True)
            else:
                self.cursor.flag_error(
                    UnexpectedToken(found=str(after), expected=":", context=CONTEXT)
                )

            properties.append(Property(name, self._parse_value()))

            if self.cursor.current_token(True).kind is TokenKind.SEMICOLON:
                self.cursor.advance_token(True)

    def _parse_value(self) -> DataType:
        current = self.cursor.current_token(True)
        if current.kind in (TokenKind.IDENTIFIER, TokenKind.STRING):
            self.cursor.advance_token(True)
            return Keyword(current.text)
        if current.kind not in _VALUE_END:
            self.cursor.advance_token(True)
        return Keyword(self.config.placeholder_keyword)
