"""Reading a stream line by line in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

BUFF_SIZE = 1


class LineReader(Generic[AnyStr]):
    """Reads lines, without their newline, from a text or binary stream.

    Data is pulled from the stream ``buffer_size`` units at a time. A final
    line without a newline is still returned; a trailing newline does not
    produce an extra empty line.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFF_SIZE) -> None:
        if buffer_size < 1:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._size = buffer_size
        self._stash: Optional[AnyStr] = None

    def _split_line(self) -> Optional[AnyStr]:
        stash = self._stash
        if stash is None:
            return None
        newline = b"\n" if isinstance(stash, bytes) else "\n"
        index = stash.find(newline)
        if index < 0:
            return None
        self._stash = stash[index + 1:]
        return stash[:index]

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        while True:
            chunk = self._stream.read(self._size)
            if not chunk:
                break
            self._stash = chunk if self._stash is None else self._stash + chunk
            line = self._split_line()
            if line is not None:
                return line
        if not self._stash:
            return None
        line = self._split_line()
        if line is not None:
            return line
        line, self._stash = self._stash, None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line