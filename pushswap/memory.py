"""Byte-buffer primitives working on ``bytearray`` and other byte sequences.

Offsets and lengths are checked: asking for more bytes than a buffer holds
raises ``ValueError`` instead of running past its end.
"""

from __future__ import annotations

from collections.abc import Sequence

ByteSource = bytes | bytearray | memoryview | Sequence[int]


def _check_length(n: int, *buffers: ByteSource) -> None:
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise ValueError(f"length {n} exceeds buffer of {len(buffer)} bytes")


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    _check_length(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count`` items of ``size`` bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with the low byte of ``c``."""
    _check_length(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer


def memcpy(dst: bytearray, src: ByteSource, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_length(n, dst, src)
    if n and dst is not src:
        dst[:n] = bytes(src[:n])
    return dst


def memccpy(dst: bytearray, src: ByteSource, c: int, n: int) -> int | None:
    """Copy bytes from ``src`` to ``dst`` until the byte ``c`` has been copied.

    At most ``n`` bytes are copied. Returns the offset in ``dst`` just after
    the copied ``c``, or ``None`` when ``c`` was not among the first ``n``.
    """
    _check_length(n, dst, src)
    target = c & 0xFF
    for offset, byte in enumerate(src[:n]):
        dst[offset] = byte
        if byte == target:
            return offset + 1
    return None


def memmove(buffer: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buffer`` from offset ``src`` to offset ``dst``.

    The regions may overlap; the result is as if the source bytes were first
    copied aside.
    """
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n)
    if max(dst, src) + n > len(buffer):
        raise ValueError("region runs past the end of the buffer")
    if n and dst != src:
        buffer[dst:dst + n] = buffer[src:src + n]
    return buffer


def memchr(data: ByteSource, c: int, n: int) -> int | None:
    """Return the offset of the first byte equal to ``c`` in the first ``n``.

    Returns ``None`` when there is no such byte.
    """
    _check_length(n, data)
    target = c & 0xFF
    return next(
        (offset for offset, byte in enumerate(data[:n]) if byte == target),
        None,
    )


def memcmp(a: ByteSource, b: ByteSource, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of bytes that differ, or 0.
    """
    _check_length(n, a, b)
    for left, right in zip(a[:n], b[:n]):
        if left != right:
            return left - right
    return 0