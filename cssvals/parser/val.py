"""Dimension values.

The syntax is inspired by css:
    - `auto` -> Val.auto()
    - `12px` -> Val.px(12.0)
    - `12%` -> Val.percent(12.0)
    - `12vw` -> Val.vw(12.0)
    - `12vh` -> Val.vh(12.0)
    - `12vmin` -> Val.vmin(12.0)
    - `12vmax` -> Val.vmax(12.0)

Unlike angles a bare number is not a valid val, the unit is required.
"""

from __future__ import annotations

from cssvals.parser.combinators import Parser, alt, mapped, number, optional, run, tag, terminated, trimmed
from cssvals.values import Val, ValKind

__all__ = ["UNITS", "val_value", "val", "val_parser", "val_string_parser"]

# Order the unit suffixes are tried in.
UNITS = (ValKind.PX, ValKind.PERCENT, ValKind.VW, ValKind.VH, ValKind.VMIN, ValKind.VMAX)

def _unit(kind: ValKind) -> Parser[Val]:
    return mapped(terminated(number, tag(kind.value)), lambda value: Val(kind, value))

# Without surrounding whitespace, used directly by the rect grammar.
val_value: Parser[Val] = alt(
    mapped(tag(ValKind.AUTO.value), lambda _: Val.auto()),
    *(_unit(kind) for kind in UNITS),
)

val: Parser[Val] = trimmed(val_value)

def val_parser(input: str) -> tuple[Val, str]:
    """Parse a `Val` from the start of `input`.

    Returns
        The val and the unconsumed remainder.
    """
    return run(val, input)

def val_string_parser(input: str) -> Val | None:
    return optional(val, input, "val")
