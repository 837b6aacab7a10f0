"""csslite: a fault-tolerant tokenizer and parser for a small CSS subset."""

from csslite.config import ParserConfig
from csslite.errors import (
    ErrorHandler,
    InvalidNumber,
    ParserError,
    UnexpectedEndOfInput,
    UnexpectedToken,
    UnknownToken,
)
from csslite.lexer import CharacterSource, Lexer
from csslite.loader import open_source, parse, parse_string, tokenize, tokenize_string
from csslite.model import (
    Keyword,
    Property,
    Rule,
    Selector,
    SelectorGroup,
    Specificity,
    StyleSheet,
    Token,
    TokenKind,
)
from csslite.parser import Parser

__version__ = "0.1.0"

__all__ = [
    # entry points
    "parse",
    "parse_string",
    "tokenize",
    "tokenize_string",
    "open_source",
    # pipeline
    "CharacterSource",
    "Lexer",
    "Parser",
    "ParserConfig",
    # errors
    "ParserError",
    "InvalidNumber",
    "UnknownToken",
    "UnexpectedToken",
    "UnexpectedEndOfInput",
    "ErrorHandler",
    # model
    "Token",
    "TokenKind",
    "StyleSheet",
    "Rule",
    "SelectorGroup",
    "Selector",
    "Specificity",
    "Property",
    "Keyword",
]
