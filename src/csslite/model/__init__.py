"""csslite model layer -- public type re-exports."""

from csslite.model.stylesheet import (
    DataType,
    Keyword,
    Property,
    Rule,
    Selector,
    SelectorGroup,
    Specificity,
    StyleSheet,
)
from csslite.model.token import Token, TokenKind

__all__ = [
    # tokens
    "Token",
    "TokenKind",
    # stylesheet
    "StyleSheet",
    "Rule",
    "SelectorGroup",
    "Selector",
    "Specificity",
    "Property",
    "Keyword",
    "DataType",
]
