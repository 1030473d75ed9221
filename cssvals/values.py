from __future__ import annotations
import colorsys
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
import math
import struct

__all__ = ["f32", "to_radians", "ValKind", "Val", "ColorSpace", "Color", "Rect"]

def f32(value: float) -> float:
    """Round a float to the nearest single precision value.

    Values outside of the single precision range saturate to infinity.
    """
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)

def to_radians(degrees: float) -> float:
    return f32(math.radians(degrees))

def _decimal(value: float) -> str:
    """Shortest exact positional text for `value`, never in exponent notation."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text

class ValKind(Enum):
    """The unit of a `Val`. Member values are the css suffix for the unit."""

    AUTO = "auto"
    PX = "px"
    PERCENT = "%"
    VW = "vw"
    VH = "vh"
    VMIN = "vmin"
    VMAX = "vmax"

@dataclass(frozen=True)
class Val:
    """A single css dimension. `auto` is the only kind without a numeric value."""

    kind: ValKind
    value: float | None = None

    def __post_init__(self):
        if self.kind is ValKind.AUTO:
            if self.value is not None:
                raise ValueError("Val.auto does not carry a value")
            return
        if self.value is None:
            raise ValueError(f"Val.{self.kind.name.lower()} requires a value")
        object.__setattr__(self, "value", f32(self.value))

    @staticmethod
    def auto() -> Val:
        return Val(ValKind.AUTO)

    @staticmethod
    def px(value: float) -> Val:
        return Val(ValKind.PX, value)

    @staticmethod
    def percent(value: float) -> Val:
        return Val(ValKind.PERCENT, value)

    @staticmethod
    def vw(value: float) -> Val:
        return Val(ValKind.VW, value)

    @staticmethod
    def vh(value: float) -> Val:
        return Val(ValKind.VH, value)

    @staticmethod
    def vmin(value: float) -> Val:
        return Val(ValKind.VMIN, value)

    @staticmethod
    def vmax(value: float) -> Val:
        return Val(ValKind.VMAX, value)

    def __str__(self) -> str:
        if self.kind is ValKind.AUTO:
            return "auto"
        return f"{_decimal(self.value)}{self.kind.value}"

class ColorSpace(Enum):
    RGBA = "rgba"
    HSLA = "hsla"

@dataclass(frozen=True)
class Color:
    """A color in either the rgb or hsl color space.

    Rgb channels and saturation/lightness are in the range 0.0-1.0, hue is in degrees.
    Colors only compare equal when they share a color space, use `as_rgba` or `as_hsla`
    to compare colors across spaces.
    """

    space: ColorSpace
    channels: tuple[float, float, float]
    alpha: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, "channels", tuple(f32(c) for c in self.channels))
        object.__setattr__(self, "alpha", f32(self.alpha))

    @staticmethod
    def rgb(r: float, g: float, b: float) -> Color:
        return Color(ColorSpace.RGBA, (r, g, b))

    @staticmethod
    def rgba(r: float, g: float, b: float, a: float) -> Color:
        return Color(ColorSpace.RGBA, (r, g, b), a)

    @staticmethod
    def rgb_u8(r: int, g: int, b: int) -> Color:
        return Color.rgba_u8(r, g, b, 255)

    @staticmethod
    def rgba_u8(r: int, g: int, b: int, a: int) -> Color:
        return Color(ColorSpace.RGBA, (r / 255, g / 255, b / 255), a / 255)

    @staticmethod
    def hsl(h: float, s: float, l: float) -> Color:
        return Color(ColorSpace.HSLA, (h, s, l))

    @staticmethod
    def hsla(h: float, s: float, l: float, a: float) -> Color:
        return Color(ColorSpace.HSLA, (h, s, l), a)

    @staticmethod
    def hex(code: str) -> Color:
        """Create a color from a 3, 6 or 8 digit hex code. The leading `#` is optional."""
        code = code.lstrip("#")
        if len(code) not in [3, 6, 8] or any(c not in "0123456789abcdefABCDEF" for c in code):
            raise ValueError(f"Hex value must be 3, 6 or 8 hex digits: {code!r}")

        if len(code) == 3:
            code = f"{code[0]*2}{code[1]*2}{code[2]*2}"
        if len(code) == 6:
            code += "FF"

        return Color.rgba_u8(*(int(code[i:i+2], 16) for i in range(0, 8, 2)))

    def as_rgba(self) -> Color:
        if self.space is ColorSpace.RGBA:
            return self
        h, s, l = self.channels
        return Color(ColorSpace.RGBA, colorsys.hls_to_rgb((h / 360) % 1.0, l, s), self.alpha)

    def as_hsla(self) -> Color:
        if self.space is ColorSpace.HSLA:
            return self
        h, l, s = colorsys.rgb_to_hls(*self.channels)
        return Color(ColorSpace.HSLA, (h * 360, s, l), self.alpha)

    @property
    def red(self) -> float:
        return self.as_rgba().channels[0]

    @property
    def green(self) -> float:
        return self.as_rgba().channels[1]

    @property
    def blue(self) -> float:
        return self.as_rgba().channels[2]

    @property
    def hue(self) -> float:
        return self.as_hsla().channels[0]

    @property
    def saturation(self) -> float:
        return self.as_hsla().channels[1]

    @property
    def lightness(self) -> float:
        return self.as_hsla().channels[2]

    def to_hex(self) -> str:
        """Hex representation of the color, `#RRGGBBAA`. Channels are clamped to 0.0-1.0."""
        rgba = self.as_rgba()
        return "#" + "".join(
            f"{round(min(max(c, 0.0), 1.0) * 255):02X}"
            for c in (*rgba.channels, rgba.alpha)
        )

Color.BLACK = Color.rgb(0.0, 0.0, 0.0)
Color.WHITE = Color.rgb(1.0, 1.0, 1.0)
Color.RED = Color.rgb(1.0, 0.0, 0.0)
Color.GREEN = Color.rgb(0.0, 1.0, 0.0)
Color.BLUE = Color.rgb(0.0, 0.0, 1.0)
Color.FUCHSIA = Color.rgb(1.0, 0.0, 1.0)
Color.NONE = Color.rgba(0.0, 0.0, 0.0, 0.0)

@dataclass(frozen=True)
class Rect:
    top: Val
    right: Val
    bottom: Val
    left: Val

    @staticmethod
    def all(val: Val) -> Rect:
        return Rect(val, val, val, val)

    @staticmethod
    def from_shorthand(*values: Val) -> Rect:
        """Expand 1 to 4 values the same way css padding and margin do.

        # Args
            - top, right, bottom, left
            - top, right and left, bottom
            - top and bottom, right and left
            - all sides
        """
        if len(values) == 4:
            return Rect(*values)
        elif len(values) == 3:
            return Rect(values[0], values[1], values[2], values[1])
        elif len(values) == 2:
            return Rect(values[0], values[1], values[0], values[1])
        elif len(values) == 1:
            return Rect.all(values[0])
        raise ValueError(f"Expected 1 to 4 values for a rect shorthand, got {len(values)}")

    @property
    def points(self) -> tuple[Val, Val, Val, Val]:
        """Top, Right, Bottom, and Left respectively."""
        return (self.top, self.right, self.bottom, self.left)

    def __str__(self) -> str:
        return " ".join(str(val) for val in self.points)
