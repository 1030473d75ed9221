"""Small backtracking parser combinators.

A parser is any callable taking the full source and a start index. It returns the parsed value
and the index after the consumed input, or raises `ParseError`. Parsers never keep state, so
failing alternatives can simply be retried from the same index.
"""

from __future__ import annotations
from collections.abc import Callable
import logging
from typing import Any, TypeVar

from typing_extensions import TypeAliasType

from cssvals.parser.lexer import Check, ErrorKind, ParseError, consume_float, peek

__all__ = [
    "Parser",
    "tag",
    "char",
    "number",
    "multispace",
    "multispace1",
    "unicode_space",
    "hex_digits",
    "letters",
    "mapped",
    "sequence",
    "preceded",
    "terminated",
    "delimited",
    "separated",
    "alt",
    "trimmed",
    "finished",
    "run",
    "exhaust",
    "optional",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Parser = TypeAliasType("Parser", Callable[[str, int], tuple[T, int]], type_params=(T,))

def tag(literal: str, kind: ErrorKind = ErrorKind.SUFFIX) -> Parser[str]:
    """Match `literal` exactly (case-sensitive)."""
    def parse(source: str, index: int) -> tuple[str, int]:
        if source.startswith(literal, index):
            return literal, index + len(literal)
        raise ParseError(source, index, kind, (repr(literal),))
    return parse

def char(symbol: str, kind: ErrorKind = ErrorKind.SUFFIX) -> Parser[str]:
    if len(symbol) != 1:
        raise ValueError("char may only match one codepoint")
    return tag(symbol, kind)

number: Parser[float] = consume_float

def multispace(source: str, index: int) -> tuple[str, int]:
    """Zero or more whitespace characters. Never fails."""
    start = index
    while Check.whitespace(peek(source, index)):
        index += 1
    return source[start:index], index

def multispace1(source: str, index: int) -> tuple[str, int]:
    if not Check.whitespace(peek(source, index)):
        raise ParseError(source, index, ErrorKind.ARITY, ("whitespace",))
    return multispace(source, index)

def unicode_space(source: str, index: int) -> tuple[str, int]:
    """Zero or more characters `str.isspace` accepts, no-break and form feed included."""
    start = index
    while index < len(source) and source[index].isspace():
        index += 1
    return source[start:index], index

def hex_digits(count: int) -> Parser[str]:
    """Exactly `count` hex digits, not followed by another hex digit."""
    def parse(source: str, index: int) -> tuple[str, int]:
        end = index
        while Check.hex(peek(source, end)):
            end += 1
        if end - index != count:
            raise ParseError(source, index + min(end - index, count), ErrorKind.LITERAL, (f"{count} hex digits",))
        return source[index:end], end
    return parse

def letters(source: str, index: int) -> tuple[str, int]:
    """One or more letters."""
    end = index
    while Check.letter(peek(source, end)):
        end += 1
    if end == index:
        raise ParseError(source, index, ErrorKind.UNKNOWN_NAME, ("name",))
    return source[index:end], end

def mapped(parser: Parser[T], transform: Callable[[T], U]) -> Parser[U]:
    def parse(source: str, index: int) -> tuple[U, int]:
        value, index = parser(source, index)
        return transform(value), index
    return parse

def sequence(*parsers: Parser[Any]) -> Parser[tuple]:
    """Run each parser in order, collecting their values."""
    def parse(source: str, index: int) -> tuple[tuple, int]:
        values = []
        for parser in parsers:
            value, index = parser(source, index)
            values.append(value)
        return tuple(values), index
    return parse

def preceded(prefix: Parser[Any], parser: Parser[T]) -> Parser[T]:
    return mapped(sequence(prefix, parser), lambda values: values[1])

def terminated(parser: Parser[T], suffix: Parser[Any]) -> Parser[T]:
    return mapped(sequence(parser, suffix), lambda values: values[0])

def delimited(opening: Parser[Any], parser: Parser[T], closing: Parser[Any]) -> Parser[T]:
    return mapped(sequence(opening, parser, closing), lambda values: values[1])

def separated(parser: Parser[T], separator: Parser[Any], count: int) -> Parser[list[T]]:
    """Exactly `count` values of `parser` with `separator` between each of them."""
    rest = preceded(separator, parser)
    def parse(source: str, index: int) -> tuple[list[T], int]:
        first, index = parser(source, index)
        values = [first]
        for _ in range(count - 1):
            value, index = rest(source, index)
            values.append(value)
        return values, index
    return parse

def alt(*parsers: Parser[T]) -> Parser[T]:
    """Try each parser in order and return the first match.

    When every alternative fails the error that made it furthest into the source is raised,
    merging what each alternative expected at that position.
    """
    def parse(source: str, index: int) -> tuple[T, int]:
        errors: list[ParseError] = []
        for parser in parsers:
            try:
                return parser(source, index)
            except ParseError as error:
                errors.append(error)

        furthest = max(error.offset for error in errors)
        failures = [error for error in errors if error.offset == furthest]
        expected = []
        for error in failures:
            expected.extend(e for e in error.expected if e not in expected)
        raise ParseError(source, furthest, failures[-1].kind, expected)
    return parse

def trimmed(parser: Parser[T]) -> Parser[T]:
    """Allow whitespace on either side of `parser`."""
    return delimited(multispace, parser, multispace)

def finished(kind: ErrorKind = ErrorKind.TRAILING) -> Parser[None]:
    """Only whitespace may remain in the source."""
    def parse(source: str, index: int) -> tuple[None, int]:
        _, index = multispace(source, index)
        if index != len(source):
            raise ParseError(source, index, kind, ("end of input",))
        return None, index
    return parse

def run(parser: Parser[T], input: str) -> tuple[T, str]:
    """Run a grammar over the start of `input`.

    Returns
        The parsed value and the unconsumed remainder of `input`.
    """
    value, index = parser(input, 0)
    return value, input[index:]

def exhaust(parser: Parser[T], input: str) -> T:
    """Run a grammar that must match all of `input` apart from surrounding whitespace."""
    value, _ = terminated(parser, finished())(input, 0)
    return value

def optional(parser: Parser[T], input: str, name: str = "value") -> T | None:
    """Same as `exhaust` but returns `None` instead of raising."""
    try:
        return exhaust(parser, input)
    except ParseError as error:
        logger.debug("invalid %s string %r: %s", name, input, error)
        return None
