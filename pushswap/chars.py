"""ASCII character classification and case conversion.

Each function takes either a one-character string or an integer code.
"""

from __future__ import annotations

from typing import TypeVar

CharLike = TypeVar("CharLike", str, int)


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: str | int) -> bool:
    """ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """Code in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """Printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def is_space(c: str | int) -> bool:
    """Space, tab, newline, vertical tab, form feed or carriage return."""
    code = _code(c)
    return code == ord(" ") or 9 <= code <= 13


def _shift(c: CharLike, delta: int) -> CharLike:
    code = _code(c) + delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    if ord("a") <= _code(c) <= ord("z"):
        return _shift(c, -32)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    if ord("A") <= _code(c) <= ord("Z"):
        return _shift(c, 32)
    return c