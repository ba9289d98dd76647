"""Turning command-line arguments into the initial stack."""

from __future__ import annotations

from collections.abc import Iterable

from .chars import is_digit, is_space
from .stack import Stack
from .transform import split

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1

INVALID_NUMBER = 1
NUMBER_OVERFLOW = 2
DUPLICATE_NUMBER = 3

SEPARATOR = " "


class InputError(ValueError):
    """Raised when the arguments do not describe a valid stack.

    ``status`` is the exit status the program ends with: 1 for a word that
    is not a number, 2 for a number outside the 32-bit range and 3 for a
    number given twice.
    """

    def __init__(self, status: int, word: str) -> None:
        super().__init__(f"bad argument {word!r} (status {status})")
        self.status = status
        self.word = word


def parse_int(text: str) -> int:
    """Read a leading signed decimal number from ``text``.

    Leading whitespace is skipped and one optional sign is read; parsing
    stops at the first non-digit, so text without digits gives 0.
    Raises OverflowError when the number does not fit in 32 bits.
    """
    position = 0
    while position < len(text) and is_space(text[position]):
        position += 1
    negative = False
    if text[position:position + 1] in ("+", "-"):
        negative = text[position] == "-"
        position += 1
    magnitude = 0
    for char in text[position:]:
        if not is_digit(char):
            break
        magnitude = magnitude * 10 + ord(char) - ord("0")
    value = -magnitude if negative else magnitude
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{text!r} does not fit in 32 bits")
    return value


def is_valid_int(text: str) -> bool:
    """Tell whether ``text`` is made of digits and at most one minus sign."""
    return text.count("-") <= 1 and all(c == "-" or is_digit(c) for c in text)


def get_stack(args: Iterable[str]) -> Stack:
    """Build the stack from the arguments; the first number ends on top.

    Each argument may hold several numbers separated by spaces.
    No arguments give an empty stack. Raises InputError on a bad word.
    """
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        for word in split(arg, SEPARATOR):
            status = 0 if is_valid_int(word) else INVALID_NUMBER
            try:
                number = parse_int(word)
            except OverflowError:
                raise InputError(NUMBER_OVERFLOW, word) from None
            if number in seen:
                status = DUPLICATE_NUMBER
            if status:
                raise InputError(status, word)
            values.append(number)
            seen.add(number)
    return Stack(reversed(values))