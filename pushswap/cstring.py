"""NUL-terminated string routines on Python ``str`` values.

Positions are returned as indices; ``None`` stands for "not found".
"""

from __future__ import annotations

from collections.abc import Iterator

NUL = "\0"


def _char(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strlen(s: str) -> int:
    """Return the number of characters before the first NUL, or all of them."""
    end = s.find(NUL)
    return len(s) if end < 0 else end


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text (at most ``size - 1`` characters) and the full
    length of ``src``, which tells whether truncation happened.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    length = strlen(src)
    if size == 0:
        return "", length
    return src[:min(length, size - 1)], length


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had (``len(src) + min(size, len(dst))``).
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    src_len = strlen(src)
    dst = dst[:strlen(dst)]
    dst_len = len(dst)
    if size == 0:
        return dst, src_len
    if size < dst_len:
        return dst, src_len + size
    room = max(size - dst_len - 1, 0)
    return dst + src[:min(src_len, room)], src_len + dst_len


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL finds the terminator, at ``strlen(s)``.
    """
    c = _char(c)
    text = s[:strlen(s)]
    if c == NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``.

    Searching for NUL finds the terminator, at ``strlen(s)``.
    """
    c = _char(c)
    text = s[:strlen(s)]
    if c == NUL:
        return len(text)
    index = text.rfind(c)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    An empty needle is found at index 0.
    """
    needle = needle[:strlen(needle)]
    if not needle:
        return 0
    if length <= 0:
        return None
    window = haystack[:strlen(haystack)][:length]
    index = window.find(needle)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference of the first
    pair that differs, or 0."""
    for i in range(n):
        left = ord(a[i]) if i < len(a) else 0
        right = ord(b[i]) if i < len(b) else 0
        if left != right or left == 0:
            return left - right
    return 0


def streq(a: str, b: str) -> bool:
    """Tell whether the two strings are equal up to their terminators."""
    return strncmp(a, b, strlen(b) + 1) == 0


def strspn(s: str, accept: str) -> int:
    """Length of the leading run of ``s`` made only of characters in ``accept``."""
    allowed = set(accept[:strlen(accept)])
    count = 0
    for char in s[:strlen(s)]:
        if char not in allowed:
            break
        count += 1
    return count


def strcspn(s: str, reject: str) -> int:
    """Length of the leading run of ``s`` with no character from ``reject``."""
    banned = set(reject[:strlen(reject)])
    count = 0
    for char in s[:strlen(s)]:
        if char in banned:
            break
        count += 1
    return count


def tokenize(text: str, delim: str) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` separated by characters of ``delim``."""
    rest = text[:strlen(text)]
    while rest:
        rest = rest[strspn(rest, delim):]
        if not rest:
            return
        end = strcspn(rest, delim)
        yield rest[:end]
        rest = rest[end + 1:]


def strreplace(s: str, search: str | None, replace: str | None) -> str:
    """Replace the leftmost ``search`` by ``replace`` until none is left.

    The text is searched again from its start after every replacement.
    With ``search`` or ``replace`` missing, ``s`` is returned unchanged.
    Raises ValueError when the replacing could never finish.
    """
    if search is None or replace is None:
        return s
    if not search:
        raise ValueError("search string must not be empty")
    if search in replace:
        raise ValueError("replacement contains the search string")
    result = s
    while True:
        index = strnstr(result, search, strlen(result))
        if index is None:
            return result
        result = result[:index] + replace + result[index + len(search):]