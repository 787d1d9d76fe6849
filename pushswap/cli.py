"""Command-line entry point: read integers, rank them, report a longest increasing run."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.algorithms import DuplicateValueError, compress, lis
from pushswap.parsing import InvalidArgumentError, is_empty_array, parse_arguments
from pushswap.ringdeque import DEFAULT_LIMIT, RingDeque

ERROR_MESSAGE = "Error"
EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def sort(stack_a: RingDeque, stack_b: RingDeque, values: Sequence[int]) -> list[int]:
    """Print, one per line, a longest increasing subsequence of the values on stack A.

    ``values`` holds the ranked input in its original order; only as many of
    them as stack A holds are considered. Stack B is left untouched. The
    printed subsequence is also returned.
    """
    result = lis(list(values)[: len(stack_a)])
    for value in result:
        print(value)
    return result


def push_swap(values: Sequence[int]) -> list[int]:
    """Rank ``values``, load them onto stack A and run :func:`sort` on them.

    Raises :class:`DuplicateValueError` if a value occurs twice.
    """
    ranks = compress(values)
    limit = max(DEFAULT_LIMIT, len(ranks) + 1)
    stack_a = RingDeque(limit)
    stack_b = RingDeque(limit)
    for rank in ranks:
        stack_a.push_front(rank)
    return sort(stack_a, stack_b, ranks)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program on ``argv`` (arguments without the program name).

    Returns the exit status; on bad or repeated input, ``Error`` goes to
    standard error and the status is 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if is_empty_array(args):
        return EXIT_SUCCESS
    try:
        push_swap(parse_arguments(args))
    except (InvalidArgumentError, DuplicateValueError):
        print(ERROR_MESSAGE, file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())