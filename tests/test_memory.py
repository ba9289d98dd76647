import pytest

from pushswap.memory import (
    bzero,
    calloc,
    memccpy,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_bzero_clears_prefix_only():
    buffer = bytearray(b"abcdef")
    bzero(buffer, 3)
    assert buffer == bytearray(b"\x00\x00\x00def")


def test_bzero_rejects_overlong():
    with pytest.raises(ValueError):
        bzero(bytearray(2), 3)


def test_calloc_is_zeroed_and_sized():
    block = calloc(4, 3)
    assert len(block) == 12
    assert all(byte == 0 for byte in block)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memset_uses_low_byte():
    buffer = bytearray(b"hello")
    result = memset(buffer, 0x141, 2)
    assert result is buffer
    assert buffer == bytearray(b"AAllo")


def test_memcpy_copies_prefix():
    dst = bytearray(b"xxxxxx")
    result = memcpy(dst, b"abc", 3)
    assert result is dst
    assert dst == bytearray(b"abcxxx")


def test_memcpy_zero_length_leaves_dst():
    dst = bytearray(b"keep")
    memcpy(dst, b"zzzz", 0)
    assert dst == bytearray(b"keep")


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 5)


def test_memccpy_marker_missing_copies_n():
    dst = bytearray(b"......")
    assert memccpy(dst, b"abcdef", ord("z"), 4) is None
    assert dst == bytearray(b"abcd..")


def test_memmove_overlapping_forward():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 2, 0, 4)
    assert buffer == bytearray(b"ababcd")


def test_memmove_overlapping_backward():
    buffer = bytearray(b"abcdef")
    memmove(buffer, 0, 2, 4)
    assert buffer == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"abracadabra"
    offset = memchr(data, ord("c"), len(data))
    assert data[offset] == ord("c")
    assert ord("c") not in data[:offset]


def test_memchr_outside_range_is_none():
    assert memchr(b"abcdef", ord("e"), 3) is None
    assert memchr(b"abc", ord("a"), 0) is None


def test_memcmp_equal_and_difference():
    assert memcmp(b"same", b"same", 4) == 0
    assert memcmp(b"abcX", b"abcY", 3) == 0
    assert memcmp(b"abX", b"abY", 3) == ord("X") - ord("Y")
    assert memcmp(b"\xff", b"\x00", 1) == 0xFF


def test_memcmp_negative_length():
    with pytest.raises(ValueError):
        memcmp(b"a", b"a", -1)