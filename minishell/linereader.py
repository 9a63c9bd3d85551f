"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic, Optional

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Split what a stream yields into lines.

    Lines keep their terminating newline; the final line of a stream that
    does not end in a newline is returned without one. Text and binary
    streams are both accepted.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive: {buffer_size}")
        self._stream = stream
        self.buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, (bytes, bytearray)) else "\n"  # type: ignore[return-value]

    def _fill(self) -> None:
        while self._buffer is None or self._newline(self._buffer) not in self._buffer:
            try:
                chunk = self._stream.read(self.buffer_size)
            except OSError:
                self._buffer = None
                raise
            if not chunk:
                return
            self._buffer = chunk if self._buffer is None else self._buffer + chunk

    def next_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        buffer = self._buffer
        if not buffer:
            self._buffer = None
            return None
        index = buffer.find(self._newline(buffer))
        if index < 0:
            self._buffer = None
            return buffer
        self._buffer = buffer[index + 1:]
        return buffer[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line