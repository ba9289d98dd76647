"""A singly linked list holding arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One link of a list."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.add_back(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Node | None:
        """Return the last node, or ``None`` when the list is empty."""
        return self._tail

    def pop_front(self, delete: Callable[[Any], Any] | None = None) -> Any:
        """Remove the first node and return its content.

        ``delete`` is called on the content first, when given.
        Raises IndexError when the list is empty.
        """
        node = self.head
        if node is None:
            raise IndexError("pop from an empty list")
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on each content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list of ``f`` applied to each content.

        If ``f`` raises, the contents produced so far are passed to
        ``delete`` and the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result