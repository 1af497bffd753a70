"""
One-shot comment removal and json module helpers.
"""

import json
from typing import Any, Optional, TextIO, Union, overload

from ..streaming.processor import StripComments
from ..utils.config import StripConfig
from .exceptions import UnterminatedBlockComment
from .transducer import CommentStripper


@overload
def strip_comments(data: str, config: Optional[StripConfig] = None) -> str: ...


@overload
def strip_comments(
    data: Union[bytes, bytearray], config: Optional[StripConfig] = None
) -> bytes: ...


def strip_comments(
    data: Union[str, bytes, bytearray], config: Optional[StripConfig] = None
) -> Union[str, bytes]:
    """
    Remove comments from a complete JSON-like document.

    Args:
        data: The text to filter. ``str`` input is encoded with the configured
            encoding and the result decoded back; bytes input returns bytes.
        config: Optional StripConfig for the text encoding and logger

    Returns:
        The input with all block, line and shell comments removed

    Raises:
        UnterminatedBlockComment: If the input ends inside a block comment
    """
    config = config or StripConfig()
    log = config.get_logger(__name__)

    if isinstance(data, str):
        raw = data.encode(config.encoding, config.errors)
    elif isinstance(data, (bytes, bytearray, memoryview)):
        raw = bytes(data)
    else:
        raise TypeError(
            f"strip_comments() expects str or bytes, not {type(data).__name__}"
        )

    stripper = CommentStripper()
    try:
        stripped = stripper.feed(raw) + stripper.finish()
    except UnterminatedBlockComment as e:
        log.debug(f"Input ended inside a block comment: {e}")
        raise

    if isinstance(data, str):
        return stripped.decode(config.encoding, config.errors)
    return stripped


def loads(
    s: Union[str, bytes, bytearray],
    *,
    config: Optional[StripConfig] = None,
    **kw: Any,
) -> Any:
    """
    Deserialize a JSON document that may contain comments.

    Comments are removed and the result is handed to ``json.loads``; all
    keyword arguments besides ``config`` are passed through unchanged.

    Raises:
        UnterminatedBlockComment: If the input ends inside a block comment
        json.JSONDecodeError: If the comment-free text is not valid JSON
    """
    return json.loads(strip_comments(s, config), **kw)


def load(fp: Any, *, config: Optional[StripConfig] = None, **kw: Any) -> Any:
    """
    Deserialize a JSON document with comments from a file-like object.

    Same as loads() but strips the comments while ``fp`` is being read.
    ``fp`` may be opened in text or binary mode and is left open.
    """
    stream: TextIO = StripComments.text(fp, config)
    try:
        return json.load(stream, **kw)
    finally:
        stream.close()
