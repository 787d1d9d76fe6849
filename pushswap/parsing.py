"""Validation and conversion of command-line number arguments."""

from __future__ import annotations

import re
from collections.abc import Sequence

_WHITESPACE = "\t\n\x0b\x0c\r "
_VALID_NUMBER = re.compile(rf"[{_WHITESPACE}]*[+-]?[0-9]+")
_NUMBER_PREFIX = re.compile(rf"[{_WHITESPACE}]*([+-]?)([0-9]*)")

_LONG_MAX = 2**63 - 1
_LONG_MIN = -(2**63)
_INT_BITS = 32


class InvalidArgumentError(ValueError):
    """An argument is not a well-formed integer."""


def is_valid_string(text: str) -> bool:
    """Return True if ``text`` is optional whitespace, an optional sign and digits."""
    return _VALID_NUMBER.fullmatch(text) is not None


def is_empty_array(args: Sequence[str]) -> bool:
    """Return True when there are no arguments (program name excluded)."""
    return len(args) == 0


def _wrap_int32(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def atoi(text: str) -> int:
    """Convert the leading integer of ``text`` to a 32-bit signed int.

    Parsing accumulates in 64 bits: a value past the 64-bit range yields the
    low 32 bits of the limit it crossed (-1 above, 0 below); anything else
    keeps its low 32 bits.
    """
    match = _NUMBER_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    if sign == "-":
        value = -value
    if value > _LONG_MAX:
        return _wrap_int32(_LONG_MAX)
    if value < _LONG_MIN:
        return _wrap_int32(_LONG_MIN)
    return _wrap_int32(value)


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate every argument and convert them all to integers."""
    if is_empty_array(args):
        return []
    for arg in args:
        if not is_valid_string(arg):
            raise InvalidArgumentError(f"not an integer: {arg!r}")
    return [atoi(arg) for arg in args]