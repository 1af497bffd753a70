"""
Comment-stripping state machine for jsoncomments.

The machine looks at one input byte at a time and decides, from the current
lexical state, whether that byte is data (emitted) or comment (dropped).
``step`` is a pure function; ``CommentStripper`` carries the state across
chunk boundaries and tracks where in the input it is.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .constants import (
    BACKSLASH,
    EMPTY,
    HASH,
    NEWLINE,
    QUOTE,
    SINGLE_BYTES,
    SLASH,
    STAR,
)
from .exceptions import UnterminatedBlockComment


class LexState(Enum):
    """Lexical context of the byte about to be read."""

    NORMAL = "NORMAL"
    IN_STRING = "IN_STRING"
    STRING_ESCAPE = "STRING_ESCAPE"
    MAYBE_COMMENT = "MAYBE_COMMENT"
    LINE_COMMENT = "LINE_COMMENT"
    BLOCK_COMMENT = "BLOCK_COMMENT"
    BLOCK_COMMENT_MAYBE_END = "BLOCK_COMMENT_MAYBE_END"


@dataclass(frozen=True)
class Position:
    """Position in the input (1-based line and column, 0-based byte offset)."""

    line: int = 1
    column: int = 1
    offset: int = 0


Transition = tuple[LexState, bytes]


def _normal(byte: int) -> Transition:
    if byte == QUOTE:
        return LexState.IN_STRING, SINGLE_BYTES[byte]
    if byte == SLASH:
        return LexState.MAYBE_COMMENT, EMPTY
    if byte == HASH:
        return LexState.LINE_COMMENT, EMPTY
    return LexState.NORMAL, SINGLE_BYTES[byte]


def _in_string(byte: int) -> Transition:
    if byte == QUOTE:
        return LexState.NORMAL, SINGLE_BYTES[byte]
    if byte == BACKSLASH:
        return LexState.STRING_ESCAPE, SINGLE_BYTES[byte]
    return LexState.IN_STRING, SINGLE_BYTES[byte]


def _string_escape(byte: int) -> Transition:
    return LexState.IN_STRING, SINGLE_BYTES[byte]


def _maybe_comment(byte: int) -> Transition:
    if byte == SLASH:
        return LexState.LINE_COMMENT, EMPTY
    if byte == STAR:
        return LexState.BLOCK_COMMENT, EMPTY
    # Not a comment after all: release the held slash, then treat the
    # byte as if it had been read in NORMAL
    state, emitted = _normal(byte)
    return state, SINGLE_BYTES[SLASH] + emitted


def _line_comment(byte: int) -> Transition:
    if byte == NEWLINE:
        return LexState.NORMAL, SINGLE_BYTES[byte]
    return LexState.LINE_COMMENT, EMPTY


def _block_comment(byte: int) -> Transition:
    if byte == STAR:
        return LexState.BLOCK_COMMENT_MAYBE_END, EMPTY
    return LexState.BLOCK_COMMENT, EMPTY


def _block_comment_maybe_end(byte: int) -> Transition:
    if byte == SLASH:
        return LexState.NORMAL, EMPTY
    if byte == STAR:
        return LexState.BLOCK_COMMENT_MAYBE_END, EMPTY
    return LexState.BLOCK_COMMENT, EMPTY


_TRANSITIONS: dict[LexState, Callable[[int], Transition]] = {
    LexState.NORMAL: _normal,
    LexState.IN_STRING: _in_string,
    LexState.STRING_ESCAPE: _string_escape,
    LexState.MAYBE_COMMENT: _maybe_comment,
    LexState.LINE_COMMENT: _line_comment,
    LexState.BLOCK_COMMENT: _block_comment,
    LexState.BLOCK_COMMENT_MAYBE_END: _block_comment_maybe_end,
}


def step(state: LexState, byte: int) -> Transition:
    """Advance the machine by one input byte.

    Returns the new state and the bytes to emit. The emitted value is empty
    for comment bytes, a single byte for data, and two bytes only when a
    held ``/`` turns out not to start a comment and is released together
    with the byte that resolved it.
    """
    if not 0 <= byte <= 255:
        raise ValueError(f"byte must be in range(256), got {byte}")
    return _TRANSITIONS[state](byte)


def at_end_of_input(
    state: LexState, comment_start: Optional[Position] = None
) -> bytes:
    """Check the final state once the input is exhausted.

    Returns any byte still held by the machine. Unterminated strings are left
    for the downstream JSON parser to reject.

    Raises:
        UnterminatedBlockComment: If the input ended inside a block comment
    """
    if state in (LexState.BLOCK_COMMENT, LexState.BLOCK_COMMENT_MAYBE_END):
        raise UnterminatedBlockComment(comment_start)
    if state is LexState.MAYBE_COMMENT:
        return SINGLE_BYTES[SLASH]
    return EMPTY


class CommentStripper:
    """Stateful driver for the comment-stripping machine.

    One instance filters one document: call ``feed`` with consecutive chunks
    of input and ``finish`` once the input is exhausted. Chunk boundaries have
    no effect on the output.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return to the initial state so the instance can filter a new document."""
        self.state = LexState.NORMAL
        self.finished = False
        self._line = 1
        self._column = 1
        self._offset = 0
        self._comment_start: Optional[Position] = None

    @property
    def position(self) -> Position:
        """Position of the next input byte."""
        return Position(self._line, self._column, self._offset)

    @property
    def pending(self) -> bytes:
        """The byte held back while deciding whether a comment starts."""
        if self.state is LexState.MAYBE_COMMENT:
            return SINGLE_BYTES[SLASH]
        return EMPTY

    def feed(self, data: bytes) -> bytes:
        """Run ``data`` through the machine and return the bytes it emits."""
        if self.finished:
            raise ValueError("feed() called after finish()")
        if isinstance(data, str):
            raise TypeError("feed() expects bytes, not str")

        output = bytearray()
        state = self.state
        line, column, offset = self._line, self._column, self._offset

        for byte in data:
            new_state, emitted = _TRANSITIONS[state](byte)
            if new_state is LexState.BLOCK_COMMENT and state is LexState.MAYBE_COMMENT:
                # The opening slash is the previous byte, on this same line
                self._comment_start = Position(line, column - 1, offset - 1)
            if emitted:
                output += emitted
            state = new_state

            offset += 1
            if byte == NEWLINE:
                line += 1
                column = 1
            else:
                column += 1

        self.state = state
        self._line, self._column, self._offset = line, column, offset
        return bytes(output)

    def finish(self) -> bytes:
        """Signal end of input and return any byte still held back.

        Calling ``finish`` again is a no-op returning ``b""``.

        Raises:
            UnterminatedBlockComment: If the input ended inside a block comment
        """
        if self.finished:
            return EMPTY
        self.finished = True
        return at_end_of_input(self.state, self._comment_start)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(state={self.state.name}, "
            f"line={self._line}, column={self._column})"
        )
