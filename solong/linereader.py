"""Reading a source line by line in small chunks."""

from __future__ import annotations

import codecs
import os
from typing import Callable, Iterator, Optional, Union

BUFFER_SIZE = 2

Source = Union[int, object]


class LineReader:
    """Hands out the lines of a file, file object or descriptor one at a time.

    Each line keeps its trailing newline; the last line may lack one.  Input
    is read ``buffer_size`` units at a time.  Byte input is decoded with
    ``encoding``.
    """

    def __init__(
        self,
        source: Source,
        buffer_size: int = BUFFER_SIZE,
        encoding: str = "utf-8",
    ) -> None:
        if buffer_size < 1:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self._size = buffer_size
        self._read: Callable[[int], Union[bytes, str]]
        if isinstance(source, int):
            fd = source
            self._read = lambda n: os.read(fd, n)
        elif hasattr(source, "read"):
            self._read = source.read
        else:
            raise TypeError("source must be a file descriptor or have a read method")
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._pending = ""
        self._exhausted = False

    def _decode(self, chunk: Union[bytes, str]) -> str:
        if isinstance(chunk, str):
            return chunk
        return self._decoder.decode(bytes(chunk))

    def _fill(self, text: str) -> str:
        while "\n" not in text and not self._exhausted:
            chunk = self._read(self._size)
            if not chunk:
                self._exhausted = True
                text += self._decoder.decode(b"", final=True)
                break
            text += self._decode(chunk)
        return text

    def next_line(self) -> Optional[str]:
        """The next line, or None once the input is used up."""
        text = self._fill(self._pending)
        self._pending = ""
        if not text:
            return None
        end = text.find("\n")
        if end < 0:
            return text
        self._pending = text[end + 1 :]
        return text[: end + 1]

    def __iter__(self) -> Iterator[str]:
        return iter(self.next_line, None)