"""Recoverable lexing and parsing errors, and the log that collects them.

Errors are plain values: the lexer wraps them in ``ERROR`` tokens and the
parser records them in an :class:`ErrorHandler`. None of them are raised.
They carry descriptive strings only, no source positions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

__all__ = [
    "ParserError",
    "InvalidNumber",
    "UnknownToken",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "ErrorHandler",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParserError:
    """Base class for every recoverable error."""

    @property
    def message(self) -> str:
        return str(self)


@dataclass(frozen=True)
class InvalidNumber(ParserError):
    """A digit run that could not be converted to a number."""

    reason: str

    def __str__(self) -> str:
        return f"Number parse error: '{self.reason}'"


@dataclass(frozen=True)
class UnknownToken(ParserError):
    text: str

    def __str__(self) -> str:
        return f"Unknown token `{self.text}`"


@dataclass(frozen=True)
class UnexpectedToken(ParserError):
    """A token that does not fit where it was found.

    Attributes:
        found: Text of the offending token (``"EOF"`` at end of input).
        expected: What the grammar wanted instead, if known.
        context: Grammar construct being parsed, e.g. ``"selector"``.
    """

    found: str
    expected: str | None = None
    context: str | None = None

    def __str__(self) -> str:
        context = f" found in {self.context}" if self.context else ""
        expected = f", expected `{self.expected}`" if self.expected else ""
        return f"Unexpected token{context} `{self.found}`{expected}"


@dataclass(frozen=True)
class UnexpectedEndOfInput(ParserError):
    def __str__(self) -> str:
        return "Unexpected end of input"


class ErrorHandler:
    """Append-only, ordered log of errors for a single parse."""

    def __init__(self) -> None:
        self._errors: list[ParserError] = []

    def flag(self, error: ParserError) -> None:
        logger.debug("Flagged: %s", error)
        self._errors.append(error)

    @property
    def errors(self) -> list[ParserError]:
        return list(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ParserError]:
        return iter(list(self._errors))
