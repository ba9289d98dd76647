# pushswap

`pushswap` sorts a list of distinct integers on two stacks, `a` and `b`,
using a small set of operations. It prints the operations it uses, one per
line.

## Operations

| Operation | Effect                                              |
|-----------|-----------------------------------------------------|
| `sa`      | swap the top two elements of `a`                    |
| `sb`      | swap the top two elements of `b`                    |
| `pa`      | move the top of `b` onto `a`                        |
| `pb`      | move the top of `a` onto `b`                        |
| `ra`      | rotate `a`: the top element becomes the bottom      |
| `rb`      | rotate `b`: the top element becomes the bottom      |
| `rra`     | reverse-rotate `a`: the bottom element becomes the top |
| `rrb`     | reverse-rotate `b`: the bottom element becomes the top |

The goal is stack `a` holding every value, smallest on top, with `b` empty.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
```

prints

```
sa
rra
```

The numbers may come as separate arguments or as space-separated words in one
argument (`push_swap "4 67 3" 87 23`); the first number ends up on top of
stack `a`. If the list is already sorted, nothing is printed. With no
arguments the command exits quietly with status 0.

If a word is not an integer, `Error` is written to standard error and the
command exits with status 1; a number outside the 32-bit range gives status
2, and a number given twice gives status 3.

Lists of up to five numbers are handled by a dedicated short routine; longer
lists are moved to stack `b` and back in chunks of about fifty values.

## Library use

```python
import io
from pushswap.parse import get_stack
from pushswap.strategy import sort

stack = get_stack(["5 1 4", "2", "3"])
out = io.StringIO()
ops = sort(stack, out)          # list of pushswap.operations.Op
print([op.value for op in ops])
print(out.getvalue().split())   # the same instructions, as printed
```

- `pushswap.parse.get_stack(args)` builds a `pushswap.stack.Stack` from the
  arguments and raises `pushswap.parse.InputError` (with a `status` of 1, 2
  or 3) for input the command reports as `Error`.
- `pushswap.strategy.sort(stack, out)` replaces the values by their ranks,
  sorts the stack in place and returns the instructions it ran.
- `pushswap.operations.Machine` holds stacks `a` and `b`, applies `Op`
  instructions with `run` and `run_n`, writes each one to its `out` stream
  and records it in `history`.
- `pushswap.stack.Stack` offers the primitive moves `swap`, `push_to`,
  `rotate` and `reverse_rotate`, plus `min` and `max`.

The package also ships small general-purpose helpers: `pushswap.chars`
(ASCII classification), `pushswap.cstring` and `pushswap.transform` (string
routines), `pushswap.memory` (byte-buffer routines), `pushswap.linkedlist`
(a singly linked list), `pushswap.linereader` (line-by-line reading through a
fixed-size buffer) and `pushswap.output` (writing to text streams).

## What it does not do

There is no checker: the package does not read a list of instructions and
verify that they sort a given stack. It only produces instructions.

## Running the tests

```
pip install ".[test]"
pytest
```