# pushswap

Building blocks for the *push_swap* stack-sorting puzzle: strict parsing of
integer arguments, rank compression, a longest-increasing-subsequence
search, and a fixed-capacity ring deque used for the two stacks.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 1 2 5 4
```

The same entry point can be run as `python -m pushswap.cli 3 1 2 5 4`.

Every argument must be optional leading whitespace, an optional `+` or `-`
sign and one or more decimal digits, and nothing else. Each is converted to
a 32-bit signed integer (values outside that range wrap around). The values
are compressed to their ranks (0 for the smallest), loaded onto stack A, and
the ranks forming a longest increasing subsequence of the input order are
printed one per line. For the example above:

```
0
1
3
```

With no arguments the command prints nothing and exits with status 0. An
invalid argument or a repeated value prints `Error` on standard error and
exits with status 1.

## What it does not do

The command does not compute or print a sequence of stack operations
(`sa`, `pb`, `ra` and so on). It stops after reporting the longest
increasing subsequence of ranks; stack B is created but never used.

## Library

```python
from pushswap.algorithms import compress, lis, lower_bound
from pushswap.parsing import parse_arguments
from pushswap.ringdeque import RingDeque

values = parse_arguments(["3", "-1", "+7"])   # [3, -1, 7]
ranks = compress(values)                       # [1, 0, 2]
lis(ranks)                                     # [0, 2]
lower_bound([1, 3, 5], 4)                      # 2

stack = RingDeque(1000)                        # holds up to 999 values
for rank in ranks:
    stack.push_front(rank)
list(stack)                                    # [2, 0, 1]  (front to back)
stack.rotate_front()
list(stack)                                    # [0, 1, 2]
```

- `pushswap.parsing`: `is_valid_string`, `is_empty_array`, `atoi` and
  `parse_arguments`, which raises `InvalidArgumentError` (a `ValueError`)
  for anything that is not an integer.
- `pushswap.algorithms`: `lower_bound`, `is_duplicated`, `compress` (raises
  `DuplicateValueError`, a `ValueError`, when a value repeats) and `lis`.
- `pushswap.ringdeque`: `RingDeque` with `front`, `back`, `at_from_front`,
  `at_from_back`, `push_front`, `push_back`, `pop_front`, `pop_back`,
  `rotate_front`, `rotate_back` and `swap_front`. Reading from an empty
  deque or an index out of range raises `IndexError`; pushing onto a full
  one raises `OverflowError`; popping from an empty one returns `None`.
- `pushswap.cli`: `sort`, `push_swap` and `main`, the command's entry point.

The package also carries small helpers in `pushswap.chars` (ASCII
classification and case conversion), `pushswap.strings` (C-style string
functions on Python strings), `pushswap.memory` (C-style byte-buffer
functions on bytearrays), `pushswap.output` (writing to file descriptors)
and `pushswap.linkedlist` (a singly linked `LinkedList` of `Node` objects).

## Tests

```
pip install ".[test]"
pytest
```