"""Recursive-descent driver: turns a token stream into a StyleSheet."""

from __future__ import annotations

import logging

from csslite.config import ParserConfig
from csslite.errors import ErrorHandler, ParserError, UnexpectedEndOfInput, UnexpectedToken
from csslite.lexer.lexer import Lexer
from csslite.model.stylesheet import Rule, StyleSheet
from csslite.model.token import CLOSING, Token
from csslite.parser.property import PropertyParser
from csslite.parser.selector import SelectorParser

logger = logging.getLogger(__name__)


class Parser:
    """Parse a whole style sheet from a :class:`Lexer`.

    The parser owns its lexer and an :class:`ErrorHandler`. Sub-parsers get
    the parser itself as their :class:`~csslite.parser.cursor.TokenCursor`.
    Every ``ERROR`` token the lexer produces is recorded in the handler the
    first time the parser sees it, then treated as an ordinary token.
    """

    def __init__(
        self,
        lexer: Lexer,
        config: ParserConfig | None = None,
        errors: ErrorHandler | None = None,
    ) -> None:
        self.lexer = lexer
        self.config = config or ParserConfig()
        self.error_handler = errors if errors is not None else ErrorHandler()
        self._last_seen = 0

    # --- TokenCursor ---------------------------------------------------------

    def current_token(self, skip_whitespace: bool = False) -> Token:
        if skip_whitespace:
            self._skip_whitespace()
        return self._observe(self.lexer.current_token())

    def advance_token(self, skip_whitespace: bool = False) -> Token:
        token = self._observe(self.lexer.next_token())
        if skip_whitespace and token.is_whitespace:
            self._skip_whitespace()
            return self._observe(self.lexer.current_token())
        return token

    def flag_error(self, error: ParserError) -> None:
        self.error_handler.flag(error)

    def _observe(self, token: Token) -> Token:
        if self.lexer.produced != self._last_seen:
            self._last_seen = self.lexer.produced
            if token.is_error and token.error is not None:
                self.flag_error(token.error)
        return token

    def _skip_whitespace(self) -> None:
        token = self._observe(self.lexer.current_token())
        while token.is_whitespace:
            token = self._observe(self.lexer.next_token())

    # --- grammar -------------------------------------------------------------

    def parse(self) -> StyleSheet:
        rules: list[Rule] = []
        failures: list[ParserError] = []

        while True:
            current = self.current_token(True)
            if current.is_eof:
                break
            if current.kind in CLOSING:
                self.flag_error(UnexpectedToken(found=str(current), context="rule"))
                self.advance_token(True)
                continue

            result = self.parse_rule()
            if isinstance(result, Rule):
                rules.append(result)
            else:
                logger.debug("Rule failed: %s", result)
                failures.append(result)

        logger.info(
            "Parsed %d rule(s), %d failed rule(s), %d error(s) flagged",
            len(rules),
            len(failures),
            len(self.error_handler),
        )
        return StyleSheet(rules=rules, errors=failures, flagged=self.error_handler.errors)

    def parse_rule(self) -> Rule | ParserError:
        """Parse one selector list and its declaration block."""
        first = self.current_token(True)
        selectors = SelectorParser(self).parse()

        if self.current_token(True).is_eof:
            return UnexpectedEndOfInput()

        properties = PropertyParser(self, self.config).parse()
        if isinstance(properties, ParserError):
            return properties
        if not selectors:
            return UnexpectedToken(found=str(first), expected="selector", context="rule")
        return Rule(selectors=selectors, properties=properties)
