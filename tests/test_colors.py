from concurrent.futures import ThreadPoolExecutor

import pytest

from cssvals import CSS_COLOR_TABLE, Color, color_string_parser
from cssvals.colors import NAMED_COLOR_HEX


def test_table_has_every_named_color() -> None:
    assert len(CSS_COLOR_TABLE) == 148
    assert set(CSS_COLOR_TABLE) == set(NAMED_COLOR_HEX)
    assert all(name == name.lower() for name in CSS_COLOR_TABLE)


@pytest.mark.parametrize(
    "name, code",
    [
        ("red", "FF0000"),
        ("rebeccapurple", "663399"),
        ("aliceblue", "F0F8FF"),
        ("yellowgreen", "9ACD32"),
    ],
)
def test_table_entries(name: str, code: str) -> None:
    assert CSS_COLOR_TABLE[name] == Color.hex(code)
    assert color_string_parser(name) == Color.hex(code)


def test_aliases_share_a_color() -> None:
    assert CSS_COLOR_TABLE["gray"] == CSS_COLOR_TABLE["grey"]
    assert CSS_COLOR_TABLE["aqua"] == CSS_COLOR_TABLE["cyan"]
    assert CSS_COLOR_TABLE["fuchsia"] == CSS_COLOR_TABLE["magenta"]


def test_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CSS_COLOR_TABLE["red"] = Color.BLUE  # type: ignore[index]
    assert CSS_COLOR_TABLE["red"] == Color.RED


def test_concurrent_parsing_is_consistent() -> None:
    sources = ["red", "#F00", "rgb(1, 0, 0)", "navy", "notacolor"] * 40
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(color_string_parser, sources))
    assert results == [color_string_parser(source) for source in sources]
    assert results[:5] == [Color.RED, Color.RED, Color.RED, Color.hex("000080"), None]
