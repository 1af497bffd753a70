"""
Configuration for jsoncomments filtering.

This module defines the stream and text-decoding options shared by the
one-shot and pull-based adapters.
"""

import codecs
import logging
from dataclasses import dataclass
from typing import Any, Optional

DEFAULT_CHUNK_SIZE = 8192

_DELIMITERS = '"\\/*#\n'

# Codec families where every byte of a non-ASCII character is >= 0x80
_BYTE_SAFE_CODECS = ("utf-8",)
_BYTE_SAFE_PREFIXES = ("ascii", "iso8859-", "cp125", "mac-", "koi8-")


@dataclass
class StreamSettings:
    """Settings for pulling data from an underlying source."""
    chunk_size: int = DEFAULT_CHUNK_SIZE


@dataclass
class DecodeSettings:
    """Settings for converting between text and bytes."""
    encoding: str = "utf-8"
    errors: str = "strict"


@dataclass
class StripConfig:
    """Configuration options for comment stripping."""

    stream: Optional[StreamSettings] = None
    decode: Optional[DecodeSettings] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        stream: Optional[StreamSettings] = None,
        decode: Optional[DecodeSettings] = None,
        logger: Optional[logging.Logger] = None,
        **flat_options: Any,  # chunk_size, encoding, errors
    ):
        unknown = set(flat_options) - {"chunk_size", "encoding", "errors"}
        if unknown:
            raise TypeError(f"Unknown configuration options: {sorted(unknown)}")

        if stream is not None:
            self.stream = stream
        else:
            self.stream = StreamSettings(
                chunk_size=flat_options.get("chunk_size", DEFAULT_CHUNK_SIZE),
            )

        if decode is not None:
            self.decode = decode
        else:
            self.decode = DecodeSettings(
                encoding=flat_options.get("encoding", "utf-8"),
                errors=flat_options.get("errors", "strict"),
            )

        self.logger = logger

        if self.stream.chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        try:
            codec_name = codecs.lookup(self.decode.encoding).name
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {self.decode.encoding}") from e
        # Multibyte codecs such as shift_jis reuse 0x5C as a trail byte
        if not (
            codec_name in _BYTE_SAFE_CODECS
            or codec_name.startswith(_BYTE_SAFE_PREFIXES)
        ):
            raise ValueError(
                f"Encoding {self.decode.encoding} may produce delimiter bytes "
                f"inside non-ASCII characters"
            )
        # The machine works on bytes, so delimiters must encode as themselves
        if _DELIMITERS.encode(self.decode.encoding) != _DELIMITERS.encode("ascii"):
            raise ValueError(
                f"Encoding {self.decode.encoding} is not ASCII-compatible"
            )

    @property
    def chunk_size(self) -> int:
        """Number of bytes requested from the source per read."""
        assert self.stream is not None
        return self.stream.chunk_size

    @property
    def encoding(self) -> str:
        """Text encoding used for str input and output."""
        assert self.decode is not None
        return self.decode.encoding

    @property
    def errors(self) -> str:
        """Error handler name used when encoding or decoding text."""
        assert self.decode is not None
        return self.decode.errors

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger, or the module logger for ``name``."""
        return self.logger or logging.getLogger(name)
