"""The sorting strategy: ranking, targeted rotations and the two sorters."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .operations import Machine, Op
from .ordering import insertion_sort, is_sorted
from .stack import Stack

CHUNK_CONSTANT = 50
SORT_COMPLEX_LIMIT = 5


def index_values(values: Iterable[int]) -> list[int]:
    """Replace each value by its position in the sorted order."""
    values = list(values)
    ranks: dict[int, int] = {}
    for position, value in enumerate(insertion_sort(values)):
        ranks.setdefault(value, position)
    return [ranks[value] for value in values]


def find_index(stack: Stack, n: int) -> int | None:
    """Return the position of ``n`` counted from the bottom, searching from
    the top; ``None`` when absent."""
    try:
        from_top = stack.items[::-1].index(n)
    except ValueError:
        return None
    return len(stack) - 1 - from_top


def closest_above(stack: Stack, n: int) -> int:
    """Smallest value greater than ``n``; ``n`` itself when there is none."""
    return min((value for value in stack if value > n), default=n)


def closest_below(stack: Stack, n: int) -> int:
    """Largest value smaller than ``n``; ``n`` itself when there is none."""
    return max((value for value in stack if value < n), default=n)


def _smart_rotate(
    machine: Machine, stack: Stack, n: int, forward: Op, backward: Op
) -> None:
    position = find_index(stack, n)
    if position is None:
        return
    top = len(stack) - 1
    if position < top // 2:
        machine.run_n(backward, position + 1)
    else:
        machine.run_n(forward, top - position)


def smart_rotate_a(machine: Machine, n: int) -> None:
    """Bring ``n`` to the top of stack a the shorter way round."""
    _smart_rotate(machine, machine.a, n, Op.RA, Op.RRA)


def smart_rotate_b(machine: Machine, n: int) -> None:
    """Bring ``n`` to the top of stack b the shorter way round."""
    _smart_rotate(machine, machine.b, n, Op.RB, Op.RRB)


def move_to_top(machine: Machine, low: int, high: int) -> None:
    """Bring a value of a lying in ``[low, high]`` to the top of a.

    Of the lowest and the highest such value in the stack, the one nearer
    an end is chosen. Raises ValueError when a holds no such value.
    """
    a = machine.a
    matches = [i for i, value in enumerate(a) if low <= value <= high]
    if not matches:
        raise ValueError(f"no value between {low} and {high}")
    first, last = matches[0], matches[-1]
    chosen = first if first < len(a) - 1 - last else last
    smart_rotate_a(machine, a.items[chosen])


def move_min_or_max_to_top(machine: Machine) -> None:
    """Bring the smallest or the largest value of b, whichever is cheaper,
    to the top of b."""
    b = machine.b
    smallest, largest = b.min(), b.max()
    low = find_index(b, smallest)
    high = find_index(b, largest)
    target = smallest if low < len(b) - 1 - high else largest
    smart_rotate_b(machine, target)


def _put_in_position(machine: Machine) -> None:
    a, b = machine.a, machine.b
    top_b = b.items[-1]
    to_move = closest_above(a, top_b)
    if to_move == top_b and len(a):
        to_move = a.min()
    smart_rotate_a(machine, to_move)
    machine.run(Op.PA)


def _sort_three(machine: Machine) -> None:
    bottom, middle, top = machine.a.items
    if bottom > middle < top < bottom:
        machine.run(Op.SA)
    elif bottom < middle < top:
        machine.run(Op.SA)
        machine.run(Op.RRA)
    elif bottom > middle < top and top > bottom:
        machine.run(Op.RA)
    elif bottom < middle > top and top < bottom:
        machine.run(Op.SA)
        machine.run(Op.RA)
    elif bottom < middle > top and top > bottom:
        machine.run(Op.RRA)


def sort_small(machine: Machine) -> None:
    """Sort stack a of up to a few ranked values (0 to n-1)."""
    size = len(machine.a)
    if size < 2:
        return
    if size == 2:
        machine.run(Op.SA)
    elif size == 3:
        _sort_three(machine)
    else:
        machine.run_n(Op.PB, size - 3)
        _sort_three(machine)
        while len(machine.b):
            _put_in_position(machine)
        smart_rotate_a(machine, 0)


def _move_chunk(machine: Machine, low: int, high: int) -> None:
    for _ in range(high - low + 1):
        move_to_top(machine, low, high)
        machine.run(Op.PB)


def _sort_chunk(machine: Machine) -> None:
    while len(machine.b):
        move_min_or_max_to_top(machine)
        _put_in_position(machine)


def sort_complex(machine: Machine) -> None:
    """Sort stack a of ranked values chunk by chunk, largest chunk first."""
    a = machine.a
    chunks = len(a) // CHUNK_CONSTANT + 1
    limit_max = a.max()
    step = len(a) // chunks
    while chunks >= 1:
        limit_min = a.min() if chunks == 1 else limit_max - step + 1
        _move_chunk(machine, limit_min, limit_max)
        _sort_chunk(machine)
        limit_max = limit_min - 1
        chunks -= 1
    smart_rotate_a(machine, a.min())


def sort(stack: Stack, out: TextIO | None = None) -> list[Op]:
    """Rank the values of ``stack`` in place, then sort it so the smallest
    ends on top, writing the instructions to ``out``.

    Returns the instructions that were run.
    """
    stack.items = index_values(stack.items)
    machine = Machine(stack, out=out)
    if len(stack) <= 1 or is_sorted(stack):
        return machine.history
    if len(stack) <= SORT_COMPLEX_LIMIT:
        sort_small(machine)
    else:
        sort_complex(machine)
    return machine.history