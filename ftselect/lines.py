"""Line-by-line reading from a file-like stream."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

DEFAULT_CHUNK_SIZE = 69420


class LineReader:
    """Read lines, without their newline, from a stream read in chunks.

    The stream may yield ``str`` or ``bytes``; lines come back as the same type.
    A final line with no newline is still returned; an empty stream yields nothing.
    """

    def __init__(self, stream: Any, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        if chunk_size < 1:
            raise ValueError("chunk_size must be at least 1")
        self._stream = stream
        self._chunk_size = chunk_size
        self._pending: str | bytes | None = None
        self._eof = False

    @staticmethod
    def _newline(data: str | bytes) -> str | bytes:
        return "\n" if isinstance(data, str) else b"\n"

    def read_line(self) -> str | bytes | None:
        """Return the next line, or None when the stream is exhausted."""
        while not self._eof:
            if self._pending and self._newline(self._pending) in self._pending:
                break
            chunk = self._stream.read(self._chunk_size)
            if not chunk:
                self._eof = True
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if not self._pending:
            return None
        line, found, rest = self._pending.partition(self._newline(self._pending))
        self._pending = rest if found else None
        return line

    def __iter__(self) -> Iterator[str | bytes]:
        while (line := self.read_line()) is not None:
            yield line