"""Color values.

The syntax is inspired by css:
    - `red`, `blue` -> css color names (see https://drafts.csswg.org/css-color/#named-colors)
    - `#f0f`, `#ff00ff` -> hex color (3 or 6 digits)
    - `#ff00ff00` -> hex color with alpha (8 digits)
    - `rgb(1.0, 0.0, 0.0)` -> rgb color (0.0-1.0)
    - `rgba(1.0, 0.0, 0.0, 1.0)` -> rgb color with alpha (0.0-1.0)
    - `hsl(0.0, 1.0, 0.5)` -> hsl color (hue in degrees, 0.0-1.0)
    - `hsla(0.0, 1.0, 0.5, 1.0)` -> hsl color with alpha

Color names are matched case-insensitively, function names and units are not.
"""

from __future__ import annotations
from collections.abc import Callable

from cssvals.colors import CSS_COLOR_TABLE
from cssvals.parser.combinators import (
    Parser,
    alt,
    char,
    delimited,
    hex_digits,
    letters,
    mapped,
    multispace,
    number,
    optional,
    preceded,
    run,
    separated,
    sequence,
    tag,
    trimmed,
)
from cssvals.parser.lexer import ErrorKind, ParseError
from cssvals.values import Color

__all__ = ["color", "color_parser", "color_string_parser"]

_comma = delimited(multispace, char(",", ErrorKind.ARITY), multispace)

def _function(name: str, count: int, build: Callable[..., Color]) -> Parser[Color]:
    """A color function like `rgb(1.0, 1.0, 1.0)` with `count` float arguments."""
    return mapped(
        delimited(
            sequence(tag(name), char("("), multispace),
            separated(number, _comma, count),
            sequence(multispace, char(")", ErrorKind.ARITY)),
        ),
        lambda channels: build(*channels),
    )

def _hex(count: int, build: Callable[[str], Color]) -> Parser[Color]:
    return mapped(preceded(char("#"), hex_digits(count)), build)

def _named(source: str, index: int) -> tuple[Color, int]:
    name, end = letters(source, index)
    color = CSS_COLOR_TABLE.get(name.lower())
    if color is None:
        raise ParseError(source, index, ErrorKind.UNKNOWN_NAME, ("color name",))
    return color, end

color: Parser[Color] = trimmed(alt(
    _function("rgb", 3, Color.rgb),
    _function("rgba", 4, Color.rgba),
    _function("hsl", 3, Color.hsl),
    _function("hsla", 4, Color.hsla),
    # Longest first, they all share the `#` prefix
    _hex(8, lambda code: Color.rgba_u8(*(int(code[i:i+2], 16) for i in range(0, 8, 2)))),
    _hex(6, lambda code: Color.rgb_u8(*(int(code[i:i+2], 16) for i in range(0, 6, 2)))),
    _hex(3, lambda code: Color.rgb_u8(*(int(digit * 2, 16) for digit in code))),
    _named,
))

def color_parser(input: str) -> tuple[Color, str]:
    """Parse a `Color` from the start of `input`.

    Returns
        The color and the unconsumed remainder.
    """
    return run(color, input)

def color_string_parser(input: str) -> Color | None:
    """The color if all of `input` is a color, otherwise `None`."""
    return optional(color, input, "color")
