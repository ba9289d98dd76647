"""Sort integers on two stacks with push_swap operations, plus small string,
byte-buffer, list and line-reading helpers."""

__version__ = "0.1.0"