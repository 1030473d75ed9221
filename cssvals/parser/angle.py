"""Angle values.

Supported formats:
    - `60deg`, `10.234deg`, `-45deg` are degrees, converted to radians
    - `3.1415rad` is radians
    - `3.1415` is radians

https://developer.mozilla.org/en-US/docs/Web/CSS/angle
"""

from __future__ import annotations

from cssvals.parser.combinators import (
    Parser,
    alt,
    delimited,
    mapped,
    number,
    optional,
    run,
    tag,
    terminated,
    unicode_space,
)
from cssvals.values import to_radians

__all__ = ["angle", "angle_parser", "angle_string_parser"]

# Suffixed forms come first so `12deg` is never read as `12` with `deg` left over.
# Any unicode whitespace may surround an angle, the other values only allow ascii whitespace.
angle: Parser[float] = delimited(unicode_space, alt(
    mapped(terminated(number, tag("deg")), to_radians),
    terminated(number, tag("rad")),
    number,
), unicode_space)

def angle_parser(input: str) -> tuple[float, str]:
    """Parse an angle in radians from the start of `input`.

    Returns
        The angle and the unconsumed remainder.

    Raises
        ParseError: When `input` does not start with an angle.
    """
    return run(angle, input)

def angle_string_parser(input: str) -> float | None:
    """The angle in radians if all of `input` is an angle, otherwise `None`."""
    return optional(angle, input, "angle")
