"""Selector list parser.

Grammar::

    selector-list  := selector-group (',' selector-group)*
    selector-group := selector (whitespace selector)*
    selector       := tag-name

A group ends at ``,``, ``{`` or end of input. Tokens that do not belong are
flagged and skipped so one bad token does not throw away the whole rule.
"""

from __future__ import annotations

from csslite.errors import UnexpectedToken
from csslite.model.stylesheet import Selector, SelectorGroup
from csslite.model.token import TokenKind
from csslite.parser.cursor import TokenCursor, is_selector_start

CONTEXT = "selector"

_SELECTOR_END = frozenset(
    {TokenKind.LEFT_BRACE, TokenKind.COMMA, TokenKind.WHITESPACE, TokenKind.EOF}
)


class SelectorParser:
    def __init__(self, cursor: TokenCursor) -> None:
        self.cursor = cursor

    def parse(self) -> list[SelectorGroup]:
        """Parse a selector list, stopping on the ``{`` that opens the block.

        Groups without any selector are dropped, so the result is empty when
        nothing usable was found.
        """
        groups = self._parse_selector_list()
        return [group for group in groups if len(group)]

    def _parse_selector_list(self) -> list[SelectorGroup]:
        groups = [self._parse_selector_group()]
        while True:
            current = self.cursor.current_token(True)
            if current.kind is TokenKind.LEFT_BRACE:
                return groups
            if current.is_eof:
                self.cursor.flag_error(UnexpectedToken(found="EOF", context=CONTEXT))
                return groups
            if current.kind is TokenKind.COMMA:
                self.cursor.advance_token(True)
            groups.append(self._parse_selector_group())

    def _parse_selector_group(self) -> SelectorGroup:
        current = self.cursor.current_token(True)
        if not is_selector_start(current):
            self.cursor.flag_error(
                UnexpectedToken(found=str(current), expected="identifier", context=CONTEXT)
            )

        selectors = [self._parse_selector()]
        while self.cursor.current_token(False).is_whitespace:
            after = self.cursor.advance_token(True)
            if after.kind in (TokenKind.COMMA, TokenKind.LEFT_BRACE, TokenKind.EOF):
                break
            selectors.append(self._parse_selector())

        return SelectorGroup([s for s in selectors if not s.is_empty])

    def _parse_selector(self) -> Selector:
        tag_name: str | None = None
        while True:
            current = self.cursor.current_token(False)
            if current.kind is TokenKind.IDENTIFIER:
                tag_name = current.text
                self.cursor.advance_token(False)
            elif current.kind in _SELECTOR_END:
                break
            else:
                # TODO: build id and class parts here once the lexer emits
                # dedicated tokens for `#name` and `.name`.
                if not current.is_error:
                    self.cursor.flag_error(UnexpectedToken(found=str(current), context=CONTEXT))
                self.cursor.advance_token(False)
        return Selector(tag_name=tag_name)

