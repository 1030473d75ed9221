"""Rect (box shorthand) values.

Follows the value order of css padding and margin, either one, two, three or four vals can be given:
    - top | right | bottom | left
    - top | left and right | bottom
    - top and bottom | left and right
    - top, right, bottom and left
"""

from __future__ import annotations

from cssvals.parser.combinators import (
    Parser,
    alt,
    delimited,
    finished,
    mapped,
    multispace,
    multispace1,
    optional,
    run,
    separated,
)
from cssvals.parser.lexer import ErrorKind
from cssvals.parser.val import val_value
from cssvals.values import Rect

__all__ = ["rect", "rect_parser", "rect_string_parser"]

def _shorthand(count: int) -> Parser[Rect]:
    """Exactly `count` whitespace separated vals and nothing after them."""
    return mapped(
        delimited(multispace, separated(val_value, multispace1, count), finished(ErrorKind.ARITY)),
        lambda values: Rect.from_shorthand(*values),
    )

# Longest first so a prefix of a longer shorthand is never accepted.
rect: Parser[Rect] = alt(_shorthand(4), _shorthand(3), _shorthand(2), _shorthand(1))

def rect_parser(input: str) -> tuple[Rect, str]:
    """Parse a `Rect` from `input`.

    Returns
        The rect and the unconsumed remainder, which is always empty.
    """
    return run(rect, input)

def rect_string_parser(input: str) -> Rect | None:
    return optional(rect, input, "rect")
