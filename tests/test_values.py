import math

import pytest

from cssvals.values import Color, ColorSpace, f32, to_radians


def test_to_radians() -> None:
    assert to_radians(180.0) == f32(math.pi)
    assert to_radians(0.0) == 0.0
    assert to_radians(-90.0) == f32(-math.pi / 2)


@pytest.mark.parametrize("code", ["#F00", "F00", "#FF0000", "FF0000", "#FF0000FF", "#ff0000ff"])
def test_color_hex(code: str) -> None:
    assert Color.hex(code) == Color.RED


@pytest.mark.parametrize("code", ["", "#", "#FF", "#FFFF", "#FFFFFFF", "#GGGGGG", "#FF0000FF00"])
def test_color_hex_rejects(code: str) -> None:
    with pytest.raises(ValueError):
        Color.hex(code)


def test_color_to_hex() -> None:
    assert Color.RED.to_hex() == "#FF0000FF"
    assert Color.NONE.to_hex() == "#00000000"
    assert Color.hex("#336699CC").to_hex() == "#336699CC"
    assert Color.rgba(2.0, -1.0, 0.5, 1.0).to_hex() == "#FF0080FF"


def test_hsl_conversion() -> None:
    red = Color.RED.as_hsla()
    assert red.space is ColorSpace.HSLA
    assert red.channels == (0.0, 1.0, 0.5)
    assert Color.hsl(0.0, 1.0, 0.5).as_rgba() == Color.RED
    assert Color.hsl(120.0, 1.0, 0.5).as_rgba().channels == pytest.approx((0.0, 1.0, 0.0))
    assert Color.hsl(240.0, 1.0, 0.5).as_rgba().channels == pytest.approx((0.0, 0.0, 1.0))
    assert Color.hsla(0.0, 1.0, 0.5, 0.25).as_rgba().alpha == 0.25


def test_conversion_is_identity_within_a_space() -> None:
    assert Color.RED.as_rgba() is Color.RED
    hsl = Color.hsl(10.0, 0.5, 0.5)
    assert hsl.as_hsla() is hsl


def test_colors_compare_by_space() -> None:
    assert Color.hsl(0.0, 1.0, 0.5) != Color.RED
    assert Color.hsl(0.0, 1.0, 0.5).as_rgba() == Color.RED


def test_channel_accessors() -> None:
    assert (Color.RED.red, Color.RED.green, Color.RED.blue) == (1.0, 0.0, 0.0)
    assert (Color.RED.hue, Color.RED.saturation, Color.RED.lightness) == (0.0, 1.0, 0.5)
    hsl = Color.hsl(0.0, 1.0, 0.5)
    assert (hsl.red, hsl.green, hsl.blue) == (1.0, 0.0, 0.0)


def test_channels_are_single_precision() -> None:
    color = Color.rgba(0.1, 0.2, 0.3, 0.4)
    assert color.channels == (f32(0.1), f32(0.2), f32(0.3))
    assert color.alpha == f32(0.4)
    assert Color.rgb_u8(255, 0, 0) == Color.rgb(1.0, 0.0, 0.0)
