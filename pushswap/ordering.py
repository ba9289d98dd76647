"""Ordering helpers: sortedness check, binary search and insertion sort."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections.abc import Iterable, Sequence
from itertools import pairwise


def is_sorted(stack: Iterable[int]) -> bool:
    """Tell whether a stack, read bottom to top, never increases.

    That is the finished state: the smallest value sits on top.
    """
    return all(upper <= lower for lower, upper in pairwise(stack))


def binary_search(n: int, data: Sequence[int]) -> bool:
    """Tell whether ``n`` occurs in the ascending sequence ``data``."""
    position = bisect_left(data, n)
    return position < len(data) and data[position] == n


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending, built by insertion."""
    result: list[int] = []
    for value in values:
        insort(result, value)
    return result