"""Line-buffered character cursor over a byte or text stream."""

from __future__ import annotations

import codecs
import io
import logging
import os
from collections import deque
from collections.abc import Iterator
from enum import Enum
from typing import IO

from csslite.config import ParserConfig

logger = logging.getLogger(__name__)


class SourceState(Enum):
    UNINITIALIZED = "uninitialized"
    READING = "reading"
    EXHAUSTED = "exhausted"


class CharacterSource:
    """Forward-only character cursor.

    The stream is read one line at a time. Byte lines are decoded with an
    incremental decoder before any indexing, so positions always count
    decoded characters. Lines keep their terminator.

    Once the stream returns no more data the source is ``EXHAUSTED`` and
    every read returns ``None``. Errors raised by the stream (``OSError``, or
    ``UnicodeDecodeError`` under strict decoding) are not caught.
    """

    def __init__(
        self,
        stream: IO[bytes] | IO[str],
        *,
        encoding: str = "utf-8",
        errors: str = "strict",
        owns_stream: bool = False,
    ) -> None:
        self._stream = stream
        self._decoder = codecs.getincrementaldecoder(encoding)(errors)
        self._owns_stream = owns_stream
        self._binary: bool | None = None
        self._drained = False

        self._state = SourceState.UNINITIALIZED
        self._line = ""
        self._position = 0
        # Lines read ahead by peek_n() that the cursor has not reached yet.
        self._pending: deque[str] = deque()

    @classmethod
    def from_path(
        cls, path: str | os.PathLike[str], config: ParserConfig | None = None
    ) -> CharacterSource:
        config = config or ParserConfig()
        stream = open(path, "rb")
        try:
            return cls(
                stream,
                encoding=config.encoding,
                errors=config.decode_errors,
                owns_stream=True,
            )
        except LookupError:
            stream.close()
            raise

    @classmethod
    def from_string(cls, text: str) -> CharacterSource:
        return cls(io.StringIO(text))

    # --- state ---------------------------------------------------------------

    @property
    def state(self) -> SourceState:
        return self._state

    @property
    def line(self) -> str:
        return self._line

    @property
    def position(self) -> int:
        return self._position

    @property
    def at_end_of_line(self) -> bool:
        if self._state is SourceState.EXHAUSTED:
            return True
        if self._state is SourceState.UNINITIALIZED:
            return False
        return self._position >= len(self._line) - 1

    # --- cursor --------------------------------------------------------------

    def current(self) -> str | None:
        """Character under the cursor, without consuming it."""
        if self._state is SourceState.UNINITIALIZED:
            self._next_line()
        if self._state is SourceState.EXHAUSTED:
            return None
        return self._line[self._position]

    def advance(self) -> str | None:
        """Consume the current character and return the new current one."""
        if self.current() is None:
            return None
        if self.at_end_of_line:
            self._next_line()
        else:
            self._position += 1
        return self.current()

    def peek(self) -> str | None:
        return self.peek_n(1)

    def peek_n(self, k: int) -> str | None:
        """Character ``k`` positions ahead of the cursor (``0`` is current)."""
        if k < 0:
            raise ValueError("peek distance must not be negative")
        if self.current() is None:
            return None

        index = self._position + k
        if index < len(self._line):
            return self._line[index]
        index -= len(self._line)

        for ahead in self._lines_ahead():
            if index < len(ahead):
                return ahead[index]
            index -= len(ahead)
        return None

    def close(self) -> None:
        if self._owns_stream and not self._stream.closed:
            self._stream.close()

    # --- line handling -------------------------------------------------------

    def _lines_ahead(self) -> Iterator[str]:
        """Yield pending lines, reading more from the stream as needed."""
        i = 0
        while True:
            if i == len(self._pending):
                line = self._read_line()
                if line is None:
                    return
                self._pending.append(line)
            yield self._pending[i]
            i += 1

    def _next_line(self) -> None:
        line = self._pending.popleft() if self._pending else self._read_line()
        if line is None:
            self._exhaust()
            return
        self._state = SourceState.READING
        self._line = line
        self._position = 0

    def _read_line(self) -> str | None:
        """Read and decode the next non-empty line, or None when drained."""
        while not self._drained:
            chunk = self._stream.readline()
            if self._binary is None and chunk:
                self._binary = isinstance(chunk, bytes)

            if not chunk:
                self._drained = True
                if self._binary:
                    tail = self._decoder.decode(b"", final=True)
                    if tail:
                        return tail
                return None

            if isinstance(chunk, bytes):
                line = self._decoder.decode(chunk)
                # An incomplete multi-byte sequence decodes to nothing yet.
                if line:
                    return line
                continue
            return chunk
        return None

    def _exhaust(self) -> None:
        if self._state is not SourceState.EXHAUSTED:
            logger.debug("Character source exhausted")
        self._state = SourceState.EXHAUSTED
        self._line = ""
        self._position = 0
        self.close()
