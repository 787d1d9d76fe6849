"""A fixed-capacity double-ended queue stored in a circular buffer."""

from __future__ import annotations

from collections.abc import Iterator

DEFAULT_LIMIT = 1000


class RingDeque:
    """Double-ended queue of integers backed by a circular buffer of ``limit`` slots.

    The "front" is the top of the stack; ``at_from_front(0)`` is the front
    element and ``at_from_back(0)`` is the back element. One slot of the
    buffer is always kept free, so at most ``limit - 1`` values fit.
    """

    def __init__(self, limit: int = DEFAULT_LIMIT) -> None:
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")
        self._data = [0] * limit
        self._limit = limit
        self._head = limit - 1
        self._tail = 0

    @property
    def capacity(self) -> int:
        """Largest number of values the deque can hold."""
        return self._limit - 1

    def __len__(self) -> int:
        return (self._head - self._tail + 1) % self._limit

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[int]:
        """Yield the values from front to back."""
        for offset in range(len(self)):
            yield self._data[(self._head - offset) % self._limit]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, limit={self._limit})"

    def front(self) -> int:
        """Return the front value."""
        if not self:
            raise IndexError("front of an empty deque")
        return self._data[self._head]

    def back(self) -> int:
        """Return the back value."""
        if not self:
            raise IndexError("back of an empty deque")
        return self._data[self._tail]

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise IndexError(f"deque index {index} out of range")

    def at_from_front(self, index: int) -> int:
        """Return the value ``index`` places behind the front."""
        self._check_index(index)
        return self._data[(self._head - index) % self._limit]

    def at_from_back(self, index: int) -> int:
        """Return the value ``index`` places ahead of the back."""
        self._check_index(index)
        return self._data[(self._tail + index) % self._limit]

    def _check_room(self) -> None:
        if len(self) >= self.capacity:
            raise OverflowError(f"deque is full ({self.capacity} values)")

    def push_front(self, value: int) -> None:
        """Put ``value`` on the front."""
        self._check_room()
        self._head = (self._head + 1) % self._limit
        self._data[self._head] = value

    def push_back(self, value: int) -> None:
        """Put ``value`` on the back."""
        self._check_room()
        self._tail = (self._tail - 1) % self._limit
        self._data[self._tail] = value

    def pop_front(self) -> int | None:
        """Remove and return the front value; an empty deque is left alone."""
        if not self:
            return None
        value = self._data[self._head]
        self._head = (self._head - 1) % self._limit
        return value

    def pop_back(self) -> int | None:
        """Remove and return the back value; an empty deque is left alone."""
        if not self:
            return None
        value = self._data[self._tail]
        self._tail = (self._tail + 1) % self._limit
        return value

    def rotate_front(self) -> None:
        """Move the front value to the back."""
        if self:
            self.push_back(self.pop_front())

    def rotate_back(self) -> None:
        """Move the back value to the front."""
        if self:
            self.push_front(self.pop_back())

    def swap_front(self) -> None:
        """Exchange the two front values; fewer than two values is a no-op."""
        if len(self) < 2:
            return
        first = self._head
        second = (self._head - 1) % self._limit
        self._data[first], self._data[second] = self._data[second], self._data[first]