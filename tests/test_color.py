import pytest

from cssvals import Color, Parse, ParseError, color_parser, color_string_parser
from cssvals.parser.lexer import ErrorKind


@pytest.mark.parametrize(
    "source, expected",
    [
        ("#FF0000", Color.RED),
        ("#FF0000FF", Color.RED),
        ("#F00", Color.RED),
        ("#f00", Color.RED),
        ("rgb(1.0, 0, 0)", Color.RED),
        ("rgba(1.0, 0, 0, 1)", Color.RED),
        ("hsl(0, 1.0, 0.5)", Color.RED.as_hsla()),
        ("hsla(0, 1.0, 0.5, 1)", Color.RED.as_hsla()),
        ("red", Color.RED),
        ("fuchsia", Color.FUCHSIA),
        ("#00000000", Color.NONE),
        ("rgba(0.5, 0.25, 1, 0.5)", Color.rgba(0.5, 0.25, 1.0, 0.5)),
        ("rgb( 1.0 ,0,  0 )", Color.RED),
        ("rgb(\n1,\t0,\n0\n)", Color.RED),
        ("hsl(120, 1, 0.25)", Color.hsl(120.0, 1.0, 0.25)),
    ],
)
def test_color_parser_variants(source: str, expected: Color) -> None:
    assert color_parser(source) == (expected, "")
    assert color_string_parser(source) == expected


def test_color_forms_are_equivalent() -> None:
    forms = ["#FF0000", "#FF0000FF", "#F00", "rgb(1.0, 0, 0)", "red"]
    colors = [color_string_parser(form) for form in forms]
    assert all(color == Color.RED for color in colors)
    assert colors[0].alpha == 1.0


@pytest.mark.parametrize("source", ["red", "  red", "red  ", " red ", "\tred\n"])
def test_color_whitespace(source: str) -> None:
    assert color_string_parser(source) == Color.RED


@pytest.mark.parametrize("source", ["Red", "RED", "rEd"])
def test_color_names_ignore_case(source: str) -> None:
    assert color_string_parser(source) == color_string_parser("red")


def test_hex_channels() -> None:
    color = color_string_parser("#336699CC")
    assert color == Color.rgba_u8(0x33, 0x66, 0x99, 0xCC)
    assert color_string_parser("#369") == Color.rgb_u8(0x33, 0x66, 0x99)
    assert color_string_parser("#369") == color_string_parser("#336699")


@pytest.mark.parametrize(
    "source",
    [
        "notacolor",
        "",
        "#",
        "#FFFF",
        "#FFFFF",
        "#FFFFFFF",
        "#FFFFFFFFF",
        "#GGG",
        "rgb(1, 0)",
        "rgb(1, 0, 0, 1)",
        "rgba(1, 0, 0)",
        "RGB(1, 0, 0)",
        "rgb(1 0 0)",
        "rgb(1, 0, 0",
        "rgb(255, x, 0)",
        "red blue",
        "redd",
        "blac\u212a",
        "r\u00e9d",
    ],
)
def test_color_string_parser_rejects(source: str) -> None:
    assert color_string_parser(source) is None


@pytest.mark.parametrize(
    "source, kind, offset",
    [
        ("notacolor", ErrorKind.UNKNOWN_NAME, 0),
        ("rgb(1, 0)", ErrorKind.ARITY, 8),
        ("rgb(1, 0, 0, 1)", ErrorKind.ARITY, 11),
        ("#FFFF", ErrorKind.LITERAL, 5),
        ("red blue", ErrorKind.TRAILING, 4),
    ],
)
def test_color_errors(source: str, kind: ErrorKind, offset: int) -> None:
    with pytest.raises(ParseError) as info:
        Parse.color(source)
    assert info.value.kind is kind
    assert info.value.offset == offset


def test_color_parser_returns_remainder() -> None:
    assert color_parser("#F00 and more") == (Color.RED, "and more")


def test_color_names_are_ascii() -> None:
    with pytest.raises(ParseError) as info:
        Parse.color("blac\u212a")
    assert info.value.kind is ErrorKind.UNKNOWN_NAME
    assert info.value.offset == 0
