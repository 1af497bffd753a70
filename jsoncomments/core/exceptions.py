"""
Exception classes for jsoncomments.

All errors raised by the filter derive from JsonCommentsError so callers can
catch them in one place, while the concrete classes also subclass the closest
builtin (ValueError, OSError) so code written against plain file objects or
the json module keeps working.
"""

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .transducer import Position


class JsonCommentsError(Exception):
    """Base exception for all jsoncomments errors."""

    def __init__(
        self,
        message: str,
        position: Optional["Position"] = None,
        suggestions: Optional[list[str]] = None,
    ):
        self.message = message
        self.position = position
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = self.message

        if self.position:
            msg += f" at line {self.position.line}, column {self.position.column}"

        if self.suggestions:
            msg += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                msg += f"\n  • {suggestion}"

        return msg

    def __str__(self) -> str:
        return self._format_message()


class UnterminatedBlockComment(JsonCommentsError, ValueError):
    """Input ended inside a /* ... */ comment.

    ``position`` points at the ``/`` that opened the comment.
    """

    def __init__(self, position: Optional["Position"] = None):
        super().__init__(
            "Unterminated block comment",
            position,
            ["Close the block comment with '*/'"],
        )


class UnderlyingSourceError(JsonCommentsError, OSError):
    """Reading from the wrapped byte source failed.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"Failed to read from source: {cause}")
