"""purelex exception hierarchy with structured diagnostics.

Lexing and parsing failures are values, not exceptions. The classes here
cover the raising entry point and misuse of the API.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from purelex.syntax.results import LexFailure, ParseFailure

__all__ = [
    "DepthLimitExceededError",
    "LookaheadDepthError",
    "PurelexError",
    "PurelexSyntaxError",
    "StreamExhaustedError",
]


class PurelexError(Exception):
    """Base exception for all purelex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PurelexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PurelexSyntaxError(PurelexError):
    """Raised by Parser.parse_or_raise() when the input does not parse.

    Attributes:
        failure: The LexFailure or ParseFailure value that was returned
    """

    def __init__(self, failure: LexFailure | ParseFailure) -> None:
        super().__init__(failure.diagnostic)
        self.failure = failure


class LookaheadDepthError(PurelexError, ValueError):
    """A rule peeked outside the stream's configured lookahead window."""


class StreamExhaustedError(PurelexError, IndexError):
    """advance() was called on a strict stream that is already at its end."""


class DepthLimitExceededError(PurelexError):
    """Raised when tree traversal exceeds the maximum depth.

    Indicates a programmatically constructed tree nested deeper than the
    visitor or serializer guard allows.
    """
