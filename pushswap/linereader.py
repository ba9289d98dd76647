"""Reading a stream line by line through a fixed-size buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 1024


class LineReader(Generic[AnyStr]):
    """Yield the lines of a text or binary stream, without their newlines.

    The stream is read in chunks of ``buffer_size``. A final line that has
    no newline is still returned; a newline at the very end does not start
    an extra empty line.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._eof = False

    def read_line(self) -> AnyStr | None:
        """Return the next line, or ``None`` once the stream is exhausted."""
        while True:
            pending = self._pending
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)  # type: ignore[arg-type]
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[:index]
            if self._eof:
                if pending:
                    self._pending = pending[:0]
                    return pending
                return None
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
            elif pending is None:
                self._pending = chunk
            else:
                self._pending = pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line