"""Byte-buffer helpers with C-library style semantics, working on bytearrays.

Positions are returned as indices instead of pointers. Byte values are
reduced to their low eight bits, as a C ``unsigned char`` conversion would.
"""

from __future__ import annotations

from collections.abc import Sequence

SIZE_MAX = 2**64 - 1


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _check_span(name: str, buf: Sequence[int], start: int, n: int) -> None:
    _check_size("length", n)
    if start < 0 or start + n > len(buf):
        raise IndexError(
            f"{name}: range {start}..{start + n} outside buffer of {len(buf)} bytes"
        )


def memset(buf: bytearray, c: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``c`` and return ``buf``."""
    _check_span("memset", buf, 0, length)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Set the first ``length`` bytes of ``buf`` to zero."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes.

    Raises OverflowError if the total size does not fit in ``SIZE_MAX``.
    """
    _check_size("count", count)
    _check_size("size", size)
    if size > 0 and count > SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(count * size)


def memchr(buf: Sequence[int], c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` among the first ``n``, or None."""
    _check_span("memchr", buf, 0, n)
    target = c & 0xFF
    return next((i for i, byte in enumerate(buf[:n]) if byte == target), None)


def memcmp(b1: Sequence[int], b2: Sequence[int], n: int) -> int:
    """Compare the first ``n`` bytes; return the first difference or 0."""
    _check_span("memcmp", b1, 0, n)
    _check_span("memcmp", b2, 0, n)
    for a, b in zip(b1[:n], b2[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dst: bytearray, src: Sequence[int], n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dst`` and return ``dst``."""
    _check_span("memcpy", src, 0, n)
    _check_span("memcpy", dst, 0, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes inside ``buf`` from ``src_offset`` to ``dst_offset``.

    Overlapping ranges are handled; ``buf`` is returned.
    """
    _check_span("memmove", buf, src_offset, n)
    _check_span("memmove", buf, dst_offset, n)
    if dst_offset != src_offset:
        buf[dst_offset : dst_offset + n] = bytes(buf[src_offset : src_offset + n])
    return buf