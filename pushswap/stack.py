"""A bounded-free integer stack with the push_swap primitive moves."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class Stack:
    """A stack of integers.

    ``items`` holds the values from bottom to top, so ``items[-1]`` is the
    top of the stack and ``items[0]`` the bottom.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.items: list[int] = list(values)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from bottom to top."""
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Stack({self.items!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Stack):
            return NotImplemented
        return self.items == other.items

    def swap(self) -> None:
        """Exchange the two topmost values; does nothing with fewer than two."""
        if len(self.items) < 2:
            return
        self.items[-1], self.items[-2] = self.items[-2], self.items[-1]

    def push_to(self, other: Stack) -> None:
        """Move the top value of this stack onto ``other``; no-op when empty."""
        if not self.items:
            return
        other.items.append(self.items.pop())

    def rotate(self) -> None:
        """Move the top value to the bottom."""
        if self.items:
            self.items.insert(0, self.items.pop())

    def reverse_rotate(self) -> None:
        """Move the bottom value to the top."""
        if self.items:
            self.items.append(self.items.pop(0))

    def max(self) -> int:
        """Return the largest value; raises ValueError when empty."""
        if not self.items:
            raise ValueError("max() of an empty stack")
        return max(self.items)

    def min(self) -> int:
        """Return the smallest value; raises ValueError when empty."""
        if not self.items:
            raise ValueError("min() of an empty stack")
        return min(self.items)