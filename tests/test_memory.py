import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxlo")


def test_memset_keeps_low_byte():
    buf = bytearray(2)
    memset(buf, 0x141, 2)
    assert buf == bytearray(b"AA")


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcd")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00cd")


def test_calloc_is_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 12
    assert not any(buf)


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX, 2)


def test_calloc_zero_size():
    assert calloc(SIZE_MAX, 0) == bytearray()


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)


def test_memchr_finds_first():
    data = b"abcabc"
    assert memchr(data, ord("c"), 6) == data.index(b"c")


def test_memchr_respects_limit():
    assert memchr(b"abcabc", ord("c"), 2) is None


def test_memcmp_equal_prefix():
    assert memcmp(b"abcx", b"abcy", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_byte_difference():
    assert memcmp(b"\x05", b"\x02", 1) == 3


def test_memcpy_copies_prefix():
    dst = bytearray(b"......")
    result = memcpy(dst, b"abcdef", 4)
    assert result is dst
    assert dst == bytearray(b"abcd..")


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


@given(st.binary(min_size=1), st.data())
def test_memmove_matches_slice_copy(data, draw):
    n = draw.draw(st.integers(0, len(data)))
    src = draw.draw(st.integers(0, len(data) - n))
    dst = draw.draw(st.integers(0, len(data) - n))
    buf = bytearray(data)
    memmove(buf, dst, src, n)
    assert buf[dst : dst + n] == data[src : src + n]
    assert len(buf) == len(data)


@given(st.binary(), st.binary())
def test_memcmp_zero_iff_equal(a, b):
    n = min(len(a), len(b))
    assert (memcmp(a, b, n) == 0) == (a[:n] == b[:n])