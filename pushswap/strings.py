"""String helpers with C-library style semantics, expressed on Python strings.

Positions are returned as indices instead of pointers, and functions that
would fill a caller's buffer return the new text instead.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import islice, zip_longest

_NUL = "\0"


def _check_char(c: str) -> None:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.find(c)
    return None if index < 0 else index


def strrchr(s: str, c: str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(c)
    if c == _NUL:
        return len(s)
    index = s.rfind(c)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the first code difference or 0.

    A string that ends early compares as if followed by NUL.
    """
    _check_size("n", n)
    pairs = zip_longest(s1, s2, fillvalue=_NUL)
    for a, b in islice(pairs, n):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return the index of ``needle`` lying wholly within the first ``length``
    characters of ``haystack``, or None. An empty needle is found at 0."""
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``dstsize`` slots (one kept for NUL).

    Returns the buffer's new text and the full length of ``src``. A zero
    size leaves ``dst`` as it was.
    """
    _check_size("dstsize", dstsize)
    if dstsize == 0:
        return dst, len(src)
    return src[: dstsize - 1], len(src)


def strlcat(dst: str, src: str, dstsize: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` slots.

    Returns the new text and the length the full result would have had,
    that is ``min(len(dst), dstsize) + len(src)``.
    """
    _check_size("dstsize", dstsize)
    total = min(len(dst), dstsize) + len(src)
    if dstsize <= len(dst):
        return dst, total
    room = dstsize - 1 - len(dst)
    return dst + src[:room], total


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return str(s)


def substr(s: str | None, start: int, length: int) -> str | None:
    """Return at most ``length`` characters of ``s`` from ``start`` on.

    A start past the end gives the empty string; ``None`` gives ``None``.
    """
    _check_size("start", start)
    _check_size("length", length)
    if s is None:
        return None
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str | None, s2: str | None) -> str | None:
    """Return ``s1`` followed by ``s2``, or None if either is None."""
    if s1 is None or s2 is None:
        return None
    return s1 + s2


def strtrim(s1: str | None, charset: str | None) -> str | None:
    """Remove characters found in ``charset`` from both ends of ``s1``."""
    if s1 is None or charset is None:
        return None
    if not charset:
        return s1
    return s1.strip(charset)


def split(s: str | None, c: str) -> list[str] | None:
    """Split ``s`` on ``c``, dropping empty fields."""
    _check_char(c)
    if s is None:
        return None
    return [part for part in s.split(c) if part]


def strmapi(s: str | None, f: Callable[[int, str], str] | None) -> str | None:
    """Build a new string from ``f(index, char)`` applied to each character."""
    if s is None or f is None:
        return None
    return "".join(f(index, char) for index, char in enumerate(s))


def striteri(
    s: MutableSequence[str] | None,
    f: Callable[[int, str], str | None] | None,
) -> None:
    """Call ``f(index, char)`` on each character of the mutable sequence ``s``.

    Iteration stops at a NUL character. When ``f`` returns a character it
    replaces the one at that index.
    """
    if s is None or f is None:
        return
    for index, char in enumerate(list(s)):
        if char == _NUL:
            break
        replacement = f(index, char)
        if replacement is not None:
            s[index] = replacement