"""Character level scanning shared by every value grammar.

References:
    - [number token](https://www.w3.org/TR/css-syntax-3/#consume-number)
"""

from __future__ import annotations
from enum import Enum
from typing import Iterable

from cssvals.values import f32

__all__ = ["WHITESPACE", "Check", "ErrorKind", "ParseError", "consume_float", "float_parser"]

WHITESPACE = " \t\r\n"
ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

class Check:
    @staticmethod
    def letter(current: str | None) -> bool:
        return current is not None and current != "" and current in ASCII_LETTERS

    @staticmethod
    def digit(current: str | None) -> bool:
        return current is not None and current in "0123456789"

    @staticmethod
    def whitespace(current: str | None) -> bool:
        return current is not None and current != "" and current in WHITESPACE

    @staticmethod
    def hex(current: str | None) -> bool:
        return current is not None and current != "" and current in "0123456789abcdefABCDEF"

    @staticmethod
    def sign(current: str | None) -> bool:
        return current is not None and current != "" and current in "+-"

    @staticmethod
    def starts_with_number(first: str | None, second: str | None, third: str | None) -> bool:
        if Check.sign(first):
            if Check.digit(second):
                return True
            elif second == "." and Check.digit(third):
                return True
            return False
        elif first == ".":
            return Check.digit(second)
        return Check.digit(first)

def peek(source: str, index: int, amount: int = 1) -> str | None:
    """The code point `amount` positions ahead of `index`, `None` past the end."""
    index += amount - 1
    if index < len(source):
        return source[index]
    return None

class ErrorKind(Enum):
    LITERAL = "literal-malformed"
    SUFFIX = "suffix-mismatch"
    UNKNOWN_NAME = "unknown-name"
    ARITY = "arity-mismatch"
    TRAILING = "trailing-input"

class ParseError(Exception):
    """A value string did not match a grammar.

    Args
        source (str): The full input that was being parsed.
        offset (int): Index into `source` where the failure was detected.
        kind (ErrorKind): Which class of failure this is.
        expected (Iterable[str]): Descriptions of what would have been accepted at `offset`.
    """

    def __init__(
        self,
        source: str,
        offset: int,
        kind: ErrorKind,
        expected: Iterable[str] = (),
    ) -> None:
        self.source = source
        self.offset = offset
        self.kind = kind
        self.expected = tuple(expected)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        found = repr(self.source[self.offset:self.offset+1]) if self.offset < len(self.source) else "end of input"
        message = f"{self.kind.value} at offset {self.offset}: found {found}"
        if len(self.expected) > 0:
            message += f", expected {' | '.join(self.expected)}"
        return message

    def pointer(self) -> str:
        """The source with a caret under the failing position."""
        return f"{self.source}\n{' ' * self.offset}^"

    def __repr__(self) -> str:
        return f"ParseError({self.kind.name}, offset={self.offset}, expected={self.expected!r})"

def consume_float(source: str, index: int) -> tuple[float, int]:
    """Consume a signed decimal literal starting at `index`.

    Accepts `1`, `1.`, `1.5` and `.5`, each with an optional sign. Exponents are not consumed.

    Returns
        The value rounded to single precision and the index after the literal.

    Raises
        ParseError: When no digit is found at the expected position.
    """
    if not Check.starts_with_number(peek(source, index), peek(source, index, 2), peek(source, index, 3)):
        raise ParseError(source, index, ErrorKind.LITERAL, ("number",))

    start = index
    if Check.sign(peek(source, index)):
        index += 1

    while Check.digit(peek(source, index)):
        index += 1

    if peek(source, index) == ".":
        index += 1
        while Check.digit(peek(source, index)):
            index += 1

    return f32(float(source[start:index])), index

def float_parser(input: str) -> tuple[float, str]:
    """Parse the float literal at the start of `input`.

    Returns
        The value and the unconsumed remainder of `input`.
    """
    value, index = consume_float(input, 0)
    return value, input[index:]
