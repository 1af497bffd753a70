"""
Streaming comment removal for file-like sources.

This module provides a pull-based reader that strips comments from another
readable object as the consumer reads, without loading the whole input into
memory. The result can be passed straight to ``json.load``.
"""

import io
from typing import Any, Optional, Union

from ..core.exceptions import UnderlyingSourceError, UnterminatedBlockComment
from ..core.transducer import CommentStripper
from ..utils.config import StripConfig


class StripComments(io.RawIOBase):
    """Readable byte stream yielding the comment-free content of ``source``.

    ``source`` is any object with a ``read(size)`` method returning bytes or
    str; text chunks are encoded with the configured encoding. Reads pull
    from the source only as far as needed to produce output, so a zero-byte
    read always means the source is exhausted.

    The source is not closed with the stream unless ``close_source`` is set.
    """

    def __init__(
        self,
        source: Any,
        config: Optional[StripConfig] = None,
        *,
        close_source: bool = False,
    ):
        super().__init__()
        self.source = source
        self.config = config or StripConfig()
        self.close_source = close_source
        self.stripper = CommentStripper()
        self.logger = self.config.get_logger(__name__)
        self.bytes_in = 0
        self.bytes_out = 0
        self._output = b""
        self._eof = False

    @classmethod
    def text(
        cls,
        source: Any,
        config: Optional[StripConfig] = None,
        *,
        close_source: bool = False,
    ) -> io.TextIOWrapper:
        """Wrap ``source`` and return a text stream over the stripped content."""
        config = config or StripConfig()
        raw = cls(source, config, close_source=close_source)
        return io.TextIOWrapper(
            io.BufferedReader(raw, buffer_size=config.chunk_size),
            encoding=config.encoding,
            errors=config.errors,
        )

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> Optional[int]:
        """Fill ``buffer`` with stripped bytes and return how many were written.

        Returns 0 only once the source is exhausted, and None if a
        non-blocking source has no data available yet.
        """
        if self.closed:
            raise ValueError("I/O operation on closed file.")

        view = memoryview(buffer).cast("B")
        if not len(view):
            return 0

        while not self._output and not self._eof:
            if not self._fill():
                return None

        count = min(len(view), len(self._output))
        view[:count] = self._output[:count]
        self._output = self._output[count:]
        self.bytes_out += count
        return count

    def _fill(self) -> bool:
        """Pull one chunk from the source through the stripper.

        Returns False when a non-blocking source had nothing to give.
        """
        chunk = self._read_chunk()
        if chunk is None:
            return False

        if not chunk:
            self._eof = True
            try:
                self._output += self.stripper.finish()
            except UnterminatedBlockComment as e:
                self.logger.debug(f"Source ended inside a block comment: {e.message}")
                raise
            self.logger.debug(
                f"Source exhausted after {self.bytes_in} bytes, "
                f"{self.bytes_out + len(self._output)} bytes kept"
            )
            return True

        self.bytes_in += len(chunk)
        self._output += self.stripper.feed(chunk)
        return True

    def _read_chunk(self) -> Optional[bytes]:
        try:
            chunk: Union[bytes, str, None] = self.source.read(self.config.chunk_size)
        except BlockingIOError:
            return None
        except OSError as e:
            raise UnderlyingSourceError(e) from e

        if isinstance(chunk, str):
            return chunk.encode(self.config.encoding, self.config.errors)
        if chunk is None:
            return None
        return bytes(chunk)

    def close(self) -> None:
        if not self.closed and self.close_source:
            self.source.close()
        super().close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} source={self.source!r} state={self.stripper.state.name}>"
