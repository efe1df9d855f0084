import pytest

from fdf.buffers import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf == b"xxxxx world"


def test_memset_uses_low_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_memset_too_long():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf == b"\x00\x00\x00\x00ef"


def test_memcpy_copies_prefix():
    dest = bytearray(b"..........")
    memcpy(dest, b"abcdef", 4)
    assert dest == b"abcd......"


def test_memcpy_zero_bytes_leaves_dest():
    dest = bytearray(b"keep")
    memcpy(dest, b"", 0)
    assert dest == b"keep"


def test_memcpy_source_too_short():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == b"ababcdeh"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 2, 5)
    assert buf == b"cdefgfgh"


def test_memmove_agrees_with_memcpy_without_overlap():
    data = b"0123456789"
    moved = bytearray(data)
    memmove(moved, 5, 0, 3)
    copied = bytearray(data)
    copied[5:8] = data[0:3]
    assert moved == copied


def test_memmove_negative_offset():
    with pytest.raises(ValueError):
        memmove(bytearray(4), -1, 0, 1)


def test_memchr_finds_first():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_uses_low_byte():
    data = b"\x00\x01\x02"
    assert memchr(data, 0x101, 3) == 1


def test_memcmp_equal():
    assert memcmp(b"abc", b"abc", 3) == 0


def test_memcmp_sign_and_symmetry():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) == -memcmp(b"abc", b"abd", 3)


def test_memcmp_bytes_are_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_stops_at_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_calloc_zeroed():
    buf = calloc(4, 3)
    assert buf == bytearray(12)


def test_calloc_zero_size():
    assert len(calloc(0, 8)) == 0
    assert len(calloc(8, 0)) == 0


def test_calloc_overflow():
    with pytest.raises(MemoryError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)