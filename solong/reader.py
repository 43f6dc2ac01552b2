"""Line-by-line reading of a stream through a fixed-size buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

DEFAULT_BUFFER_SIZE = 100


class LineReader(Generic[AnyStr]):
    """Read lines from a text or binary stream, keeping their newlines."""

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._newline: AnyStr | None = None

    def _detect_newline(self, chunk: AnyStr) -> AnyStr:
        """Fix the newline marker from the type of the first chunk read."""
        if self._newline is None:
            marker = b"\n" if isinstance(chunk, bytes) else "\n"
            self._newline = marker  # type: ignore[assignment]
        return self._newline  # type: ignore[return-value]

    def next_line(self) -> AnyStr | None:
        """Return the next line, with its newline if it has one, or None at the end."""
        pending = self._pending
        newline = self._newline
        while pending is None or newline is None or newline not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            newline = self._detect_newline(chunk)
            pending = chunk if pending is None else pending + chunk
        if not pending or newline is None:
            self._pending = None
            return None
        index = pending.find(newline)
        if index < 0:
            self._pending = None
            return pending
        self._pending = pending[index + 1:]
        return pending[:index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


def read_lines(stream: IO[AnyStr]) -> list[AnyStr]:
    """Read every remaining line of ``stream``."""
    return list(LineReader(stream))