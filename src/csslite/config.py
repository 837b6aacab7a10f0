from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ParserConfig:
    encoding: str = "utf-8"
    decode_errors: str = "strict"  # or "replace", "ignore"
    placeholder_keyword: str = "don't know yet!"
