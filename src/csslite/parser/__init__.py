from csslite.parser.core import Parser
from csslite.parser.cursor import TokenCursor, is_selector_start
from csslite.parser.property import PropertyParser
from csslite.parser.selector import SelectorParser

__all__ = ["Parser", "TokenCursor", "SelectorParser", "PropertyParser", "is_selector_start"]
