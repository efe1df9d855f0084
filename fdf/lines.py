"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional

DEFAULT_BUFFER_SIZE = 42


class LineReader:
    """Read lines, newline included, from a text or binary stream.

    The stream is read in chunks of *buffer_size*; what follows a newline
    is kept for the next line.
    """

    def __init__(self, stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive: {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None
        self._eof = False

    @staticmethod
    def _newline(data) -> object:
        return b"\n" if isinstance(data, (bytes, bytearray)) else "\n"

    def read_line(self):
        """Return the next line, or None once the stream is exhausted."""
        pending = self._pending
        while not self._eof and (
            pending is None or self._newline(pending) not in pending
        ):
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._eof = True
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        index = pending.find(self._newline(pending))
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[: index + 1]

    def __iter__(self) -> Iterator:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def iter_lines(stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator:
    """Yield the lines of *stream*, each with its newline if it had one."""
    return iter(LineReader(stream, buffer_size))