"""
Grammars for css inspired value strings.

Every value kind exposes three entry points:
    - `<kind>_parser`: parse from the start of a string, returning the value and the remainder
    - `<kind>_string_parser`: the value if the whole string matched, otherwise `None`
    - `Parse.<kind>`: the value if the whole string matched, otherwise raises `ParseError`

References:
    - [angle](https://developer.mozilla.org/en-US/docs/Web/CSS/angle)
    - [named colors](https://drafts.csswg.org/css-color/#named-colors)
    - [margin shorthand](https://developer.mozilla.org/en-US/docs/Web/CSS/margin)
"""

from cssvals.parser.angle import angle_parser, angle_string_parser
from cssvals.parser.color import color_parser, color_string_parser
from cssvals.parser.lexer import ErrorKind, ParseError, float_parser
from cssvals.parser.parse import Parse
from cssvals.parser.rect import rect_parser, rect_string_parser
from cssvals.parser.val import val_parser, val_string_parser

__all__ = [
    "ErrorKind",
    "ParseError",
    "Parse",
    "float_parser",
    "angle_parser",
    "angle_string_parser",
    "color_parser",
    "color_string_parser",
    "rect_parser",
    "rect_string_parser",
    "val_parser",
    "val_string_parser",
]
