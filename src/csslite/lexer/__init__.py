from csslite.lexer.lexer import Lexer
from csslite.lexer.source import CharacterSource, SourceState

__all__ = ["Lexer", "CharacterSource", "SourceState"]
