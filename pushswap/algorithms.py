"""Coordinate compression and longest increasing subsequence."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from itertools import pairwise


class DuplicateValueError(ValueError):
    """The input holds the same value more than once."""


def lower_bound(values: Sequence[int], target: int) -> int:
    """Return the first index in sorted ``values`` whose value is >= ``target``."""
    return bisect_left(values, target)


def is_duplicated(sorted_values: Sequence[int]) -> bool:
    """Return True if two neighbours in the sorted sequence are equal."""
    return any(a == b for a, b in pairwise(sorted_values))


def compress(values: Sequence[int]) -> list[int]:
    """Replace each value by its rank among all values, counting from zero."""
    ordered = sorted(values)
    if is_duplicated(ordered):
        raise DuplicateValueError("duplicate values in input")
    return [lower_bound(ordered, v) for v in values]


def lis(values: Sequence[int]) -> list[int]:
    """Return a longest strictly increasing subsequence of ``values``.

    Among equally long answers, each position takes the latest element that
    can end an increasing run of that length.
    """
    tails: list[int] = []
    positions: list[int] = []
    for value in values:
        pos = lower_bound(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
        positions.append(pos)

    wanted = len(tails) - 1
    picked: list[int] = []
    for value, pos in zip(reversed(values), reversed(positions)):
        if pos == wanted:
            picked.append(value)
            wanted -= 1
    picked.reverse()
    return picked