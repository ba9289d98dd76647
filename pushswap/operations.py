"""The push_swap instruction set, applied to a pair of stacks."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TextIO

from .output import put_endl
from .stack import Stack


class Op(str, Enum):
    """An instruction; its value is the text that is printed."""

    SA = "sa"
    SB = "sb"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RRA = "rra"
    RRB = "rrb"


_ACTIONS: dict[Op, Callable[[Stack, Stack], None]] = {
    Op.PA: lambda a, b: b.push_to(a),
    Op.PB: lambda a, b: a.push_to(b),
    Op.SA: lambda a, b: a.swap(),
    Op.SB: lambda a, b: b.swap(),
    Op.RA: lambda a, b: a.rotate(),
    Op.RB: lambda a, b: b.rotate(),
    Op.RRA: lambda a, b: a.reverse_rotate(),
    Op.RRB: lambda a, b: b.reverse_rotate(),
}


class Machine:
    """Two stacks, ``a`` and ``b``, and a stream the instructions go to.

    Every instruction run is written on its own line to ``out`` (standard
    output when ``None``) and recorded in ``history``.
    """

    def __init__(
        self,
        a: Stack,
        b: Stack | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.a = a
        self.b = Stack() if b is None else b
        self.out = out
        self.history: list[Op] = []

    def run(self, op: Op | str) -> None:
        """Apply one instruction; raises ValueError for an unknown one."""
        op = Op(op)
        _ACTIONS[op](self.a, self.b)
        put_endl(op.value, self.out)
        self.history.append(op)

    def run_n(self, op: Op | str, n: int) -> None:
        """Apply the same instruction ``n`` times; nothing for ``n <= 0``."""
        for _ in range(n):
            self.run(op)