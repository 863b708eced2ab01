from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Iterator


@dataclass(frozen=True)
class Window:
    index: int
    offset: int
    data: bytes
    final: bool


def read_full(source: BinaryIO, size: int) -> bytes:
    """Read exactly `size` bytes unless the stream ends first.

    Pipes and terminals may return short reads; keep asking until the
    window is full or `read` reports end-of-stream.
    """
    chunks: list[bytes] = []
    got = 0
    while got < size:
        chunk = source.read(size - got)
        if not chunk:
            break
        chunks.append(chunk)
        got += len(chunk)
    return b"".join(chunks)


class WindowReader:
    """Successive windows of `width` bytes from a binary source.

    A window is marked final when it came back short or when it is the
    last one allowed by `max_rows`. A full window cannot tell whether the
    stream ends right after it; callers that need to know ask `at_end()`,
    which reads the next window early and hands it out on the next step.
    """

    def __init__(self, source: BinaryIO, width: int, max_rows: int = 0):
        self.source = source
        self.width = width
        self.max_rows = max_rows
        self._peeked: bytes | None = None

    def _next_data(self) -> bytes:
        if self._peeked is not None:
            data, self._peeked = self._peeked, None
            return data
        return read_full(self.source, self.width)

    def at_end(self) -> bool:
        if self._peeked is None:
            self._peeked = read_full(self.source, self.width)
        return self._peeked == b""

    def __iter__(self) -> Iterator[Window]:
        index = 0
        offset = 0
        while True:
            data = self._next_data()
            if not data:
                return

            short = len(data) < self.width
            capped = self.max_rows > 0 and index + 1 >= self.max_rows
            yield Window(index=index, offset=offset, data=data, final=short or capped)

            if short or capped:
                return
            index += 1
            offset += len(data)


def iter_windows(source: BinaryIO, width: int, max_rows: int = 0) -> Iterator[Window]:
    return iter(WindowReader(source, width, max_rows))
