"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, keeping each newline.

    Data is pulled from the stream in chunks of ``buffer_size``; whatever
    follows a newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """The next line with its newline, the unterminated tail, or None at end."""
        pending = self._pending
        while pending is None or self._newline(pending) not in pending:
            chunk = self.stream.read(self.buffer_size)
            if not chunk:
                break
            pending = chunk if pending is None else pending + chunk
        if not pending:
            self._pending = None
            return None
        newline = self._newline(pending)
        cut = pending.find(newline)
        if cut < 0:
            self._pending = None
            return pending
        line, rest = pending[:cut + 1], pending[cut + 1:]
        self._pending = rest if rest else None
        return line

    @staticmethod
    def _newline(sample: AnyStr) -> AnyStr:
        return b"\n" if isinstance(sample, bytes) else "\n"  # type: ignore[return-value]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line