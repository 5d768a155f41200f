"""Line-by-line reading from a stream through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 500
MAX_BUFFER_SIZE = 99999

Chunk = Union[str, bytes]


def _newline(sample: Chunk) -> Chunk:
    return "\n" if isinstance(sample, str) else b"\n"


class LineReader:
    """Read lines from a text or binary stream, ``buffer_size`` characters at a time.

    Each line keeps its trailing newline; the last line of the stream may
    lack one. A buffer size outside 1 to 99999 falls back to the default.
    """

    def __init__(self, stream: IO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if not 1 <= buffer_size <= MAX_BUFFER_SIZE:
            buffer_size = DEFAULT_BUFFER_SIZE
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None

    @property
    def buffer_size(self) -> int:
        """Number of characters requested from the stream per read."""
        return self._buffer_size

    def read_line(self) -> Optional[Chunk]:
        """Return the next line, or None once the stream has nothing more to give."""
        while True:
            pending = self._pending
            if pending:
                index = pending.find(_newline(pending))
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[:index + 1]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                self._pending = None
                return pending or None
            self._pending = pending + chunk if pending else chunk

    def __iter__(self) -> Iterator[Chunk]:
        return iter(self.read_line, None)