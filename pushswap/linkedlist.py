"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """Singly linked list; iteration yields the contents from front to back."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_front(self, content: Any) -> None:
        """Insert ``content`` at the front."""
        self._head = Node(content, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def add_back(self, content: Any) -> None:
        """Append ``content`` at the back."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the content of the last node."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.content

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        if delete is not None:
            for content in self:
                delete(content)
        self._head = self._tail = None
        self._size = 0

    def each(self, f: Callable[[Any], object]) -> None:
        """Call ``f`` on every content from front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], object] | None = None,
    ) -> LinkedList:
        """Return a new list of ``f(content)`` for every content.

        If ``f`` returns None, the contents built so far are passed to
        ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = f(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            result.add_back(mapped)
        return result