"""Deserialization hooks for value strings.

Each hook takes whatever a deserializer produced for a field, which must be a string, and returns
the parsed value or raises `ValueError` with a fixed message. The annotated types plug the hooks
into pydantic models:

    class Node(BaseModel):
        color: ColorString
        padding: RectString
"""

from __future__ import annotations
from collections.abc import Callable
import logging
from typing import Annotated, Any, TypeVar

from pydantic import PlainValidator

from cssvals.parser.angle import angle_string_parser
from cssvals.parser.color import color_string_parser
from cssvals.parser.rect import rect_string_parser
from cssvals.parser.val import val_string_parser
from cssvals.values import Color, Rect, Val, f32

__all__ = [
    "angle_serde_parser",
    "color_serde_parser",
    "val_serde_parser",
    "rect_serde_parser",
    "AngleString",
    "ColorString",
    "ValString",
    "RectString",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

def _deserialize(value: Any, parser: Callable[[str], T | None], message: str) -> T:
    if not isinstance(value, str):
        logger.debug("%s: expected a string, got %s", message, type(value).__name__)
        raise ValueError(message)
    result = parser(value)
    if result is None:
        raise ValueError(message)
    return result

def angle_serde_parser(value: Any) -> float:
    # Plain numbers are radians, the same as a unit-less angle string
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return f32(float(value))
    return _deserialize(value, angle_string_parser, "invalid angle string")

def color_serde_parser(value: Any) -> Color:
    if isinstance(value, Color):
        return value
    return _deserialize(value, color_string_parser, "invalid color string")

def val_serde_parser(value: Any) -> Val:
    if isinstance(value, Val):
        return value
    return _deserialize(value, val_string_parser, "invalid val string")

def rect_serde_parser(value: Any) -> Rect:
    if isinstance(value, Rect):
        return value
    return _deserialize(value, rect_string_parser, "invalid rect string")

AngleString = Annotated[float, PlainValidator(angle_serde_parser)]
ColorString = Annotated[Color, PlainValidator(color_serde_parser)]
ValString = Annotated[Val, PlainValidator(val_serde_parser)]
RectString = Annotated[Rect, PlainValidator(rect_serde_parser)]
