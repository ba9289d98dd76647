"""String conversions and transformations: parsing, slicing, joining, splitting."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Any

_WHITESPACE = " \t\f\r\n\v"
_UINT_MODULUS = 1 << 32
_INT_LIMIT = 1 << 31


def _to_int32(value: int) -> int:
    value %= _UINT_MODULUS
    return value - _UINT_MODULUS if value >= _INT_LIMIT else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then digits
    up to the first non-digit. Text without digits gives 0. The result
    wraps around like a 32-bit integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    number = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        number = (number * 10 + ord(char) - ord("0")) % _UINT_MODULUS
    return _to_int32(-number if negative else number)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from ``start`` on.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str | None, b: str | None) -> str:
    """Concatenate two strings; a missing one counts as empty."""
    return (a or "") + (b or "")


def strtrim(s: str | None, charset: str | None) -> str | None:
    """Remove characters in ``charset`` from both ends of ``s``.

    ``None`` for ``s`` gives ``None``; ``None`` for ``charset`` leaves ``s``
    unchanged.
    """
    if s is None:
        return None
    if charset is None:
        return s
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"expected a single separator character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def itoa(n: int) -> str:
    """Return the decimal text of ``n``."""
    return str(n)


def uitoa(n: int) -> str:
    """Return the decimal text of the non-negative integer ``n``."""
    if n < 0:
        raise ValueError(f"expected a non-negative integer, got {n}")
    return str(n)


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``f(index, char)`` for each character of ``s``.

    Returns ``None`` when either argument is missing.
    """
    if s is None or f is None:
        return None
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[Any] | None,
    f: Callable[[int, Any], Any] | None,
) -> None:
    """Call ``f(index, item)`` on each item of ``s`` in place.

    When ``f`` returns something other than ``None``, that value replaces
    the item. Nothing happens when either argument is missing.
    """
    if s is None or f is None:
        return
    for index, item in enumerate(list(s)):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement