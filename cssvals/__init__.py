from __future__ import annotations
import logging

from cssvals.colors import CSS_COLOR_TABLE
from cssvals.parser import (
    ErrorKind,
    Parse,
    ParseError,
    angle_parser,
    angle_string_parser,
    color_parser,
    color_string_parser,
    float_parser,
    rect_parser,
    rect_string_parser,
    val_parser,
    val_string_parser,
)
from cssvals.values import Color, ColorSpace, Rect, Val, ValKind, to_radians

__version__ = "0.1.0"

__all__ = [
    "CSS_COLOR_TABLE",
    "Color",
    "ColorSpace",
    "ErrorKind",
    "Parse",
    "ParseError",
    "Rect",
    "Val",
    "ValKind",
    "angle_parser",
    "angle_string_parser",
    "color_parser",
    "color_string_parser",
    "float_parser",
    "rect_parser",
    "rect_string_parser",
    "to_radians",
    "val_parser",
    "val_string_parser",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
