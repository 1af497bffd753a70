"""
jsoncomments - Strip comments from JSON-like text before parsing it.

jsoncomments filters comments out of a byte stream or string so the result
can be handed to a standard, comment-agnostic JSON parser such as the json
module. Anything inside double-quoted strings is left untouched.

Supported comments:
- C style block comments (/* ... */)
- C style line comments (// ...)
- Shell style line comments (# ...)

Quick Start:
    import jsoncomments

    # One-shot
    clean = jsoncomments.strip_comments('{"a": 1 /* one */}')

    # Parse directly
    data = jsoncomments.loads('{"name": "John", // first name\\n "age": 43}')

    # Streaming, without reading the whole file first
    with open("settings.jsonc", "rb") as fp:
        data = jsoncomments.load(fp)

    # Or wrap any readable and pull from it yourself
    stream = jsoncomments.StripComments(fp)
"""

from .core.engine import load, loads, strip_comments
from .core.exceptions import (
    JsonCommentsError,
    UnderlyingSourceError,
    UnterminatedBlockComment,
)
from .core.transducer import CommentStripper, LexState, Position
from .streaming.processor import StripComments
from .utils.config import DecodeSettings, StreamSettings, StripConfig

__version__ = "0.1.0"
__author__ = "jsoncomments contributors"

__all__ = [
    # One-shot and json helpers
    "strip_comments", "loads", "load",
    # Streaming
    "StripComments",
    # State machine
    "CommentStripper", "LexState", "Position",
    # Configuration classes
    "StripConfig", "StreamSettings", "DecodeSettings",
    # Exception classes
    "JsonCommentsError", "UnterminatedBlockComment", "UnderlyingSourceError",
]
