"""Command-line entry point: print the instructions that sort the arguments."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .output import put_endl
from .parse import InputError, get_stack
from .strategy import sort


def main(argv: Sequence[str] | None = None) -> int:
    """Sort the numbers given as arguments, printing each instruction.

    Returns the exit status: 0 on success, or the status carried by the
    input error, after writing ``Error`` to standard error.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        stack = get_stack(args)
    except InputError as error:
        put_endl("Error", sys.stderr)
        return error.status
    sort(stack, sys.stdout)
    return 0