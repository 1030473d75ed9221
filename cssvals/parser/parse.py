"""Exhaustive parsing that reports why a value string was rejected.

The `*_string_parser` functions only say whether a string matched. `Parse` runs the same
grammars but raises `ParseError` with the offset and what was expected there.
"""

from __future__ import annotations

from cssvals.parser.angle import angle
from cssvals.parser.color import color
from cssvals.parser.combinators import exhaust
from cssvals.parser.lexer import consume_float
from cssvals.parser.rect import rect
from cssvals.parser.val import val
from cssvals.values import Color, Rect, Val

__all__ = ["Parse"]

class Parse:
    @staticmethod
    def number(source: str) -> float:
        return exhaust(consume_float, source)

    @staticmethod
    def angle(source: str) -> float:
        return exhaust(angle, source)

    @staticmethod
    def val(source: str) -> Val:
        return exhaust(val, source)

    @staticmethod
    def color(source: str) -> Color:
        return exhaust(color, source)

    @staticmethod
    def rect(source: str) -> Rect:
        return exhaust(rect, source)
