"""Immutable token stream.

A TokenStream is a read-only view of a token sequence plus a read position.
advance() returns a new stream sharing the same token tuple; nothing ever
mutates the sequence, so any number of streams derived from the same start
can be explored independently (structural sharing).
"""

from collections.abc import Iterable
from dataclasses import dataclass

from purelex.constants import DEFAULT_LOOKAHEAD_DEPTH
from purelex.diagnostics import (
    ErrorTemplate,
    LookaheadDepthError,
    StreamExhaustedError,
)

from .token import Token

__all__ = ["TokenStream"]


@dataclass(frozen=True, slots=True, repr=False)
class TokenStream:
    """Read position over a shared token tuple.

    Invariant: ``0 <= position <= len(tokens)``; ``position == len(tokens)``
    is end of input, where peek() yields the ``eof`` sentinel.

    Attributes:
        tokens: Significant tokens, without trivia and without the sentinel
        eof: End-of-input sentinel returned for reads past the end
        position: Index of the next unread token
        lookahead_depth: peek(k) is allowed for 0 <= k < lookahead_depth
        strict_end: advance() at end raises instead of returning self

    Example:
        >>> stream = TokenStream.from_tokens(tokenizer.tokenize("a(b)"))
        >>> stream.peek().kind
        'IDENT'
        >>> stream.advance().peek().kind
        'LPAREN'
        >>> stream.peek().kind  # Original unchanged
        'IDENT'
    """

    tokens: tuple[Token, ...]
    eof: Token
    position: int = 0
    lookahead_depth: int = DEFAULT_LOOKAHEAD_DEPTH
    strict_end: bool = False

    def __post_init__(self) -> None:
        """Validate the position invariant."""
        if not 0 <= self.position <= len(self.tokens):
            msg = (
                f"TokenStream position must be within 0..{len(self.tokens)}, "
                f"got {self.position}"
            )
            raise ValueError(msg)
        if self.lookahead_depth < 1:
            msg = f"lookahead_depth must be >= 1, got {self.lookahead_depth}"
            raise ValueError(msg)

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[Token],
        *,
        lookahead_depth: int = DEFAULT_LOOKAHEAD_DEPTH,
        strict_end: bool = False,
    ) -> "TokenStream":
        """Build a stream from tokenizer output.

        Trivia tokens are dropped. The sequence must end with exactly one
        end-of-input sentinel, which becomes the stream's ``eof``.

        Raises:
            ValueError: If the sentinel is missing or appears early
        """
        significant = [token for token in tokens if not token.trivia]
        if not significant or not significant[-1].is_eof:
            msg = "Token sequence must end with the end-of-input sentinel"
            raise ValueError(msg)
        if any(token.is_eof for token in significant[:-1]):
            msg = "End-of-input sentinel must be the last token"
            raise ValueError(msg)
        return cls(
            tuple(significant[:-1]),
            significant[-1],
            0,
            lookahead_depth,
            strict_end,
        )

    @property
    def at_end(self) -> bool:
        """True when every significant token has been consumed."""
        return self.position >= len(self.tokens)

    @property
    def remaining(self) -> int:
        """Number of unread significant tokens."""
        return len(self.tokens) - self.position

    @property
    def current(self) -> Token:
        """Token at the read position (same as peek(0))."""
        return self.peek(0)

    def peek(self, k: int = 0) -> Token:
        """Token k places ahead of the read position, without consuming it.

        Pure read: calling it any number of times changes nothing about what
        a later advance() returns.

        Raises:
            LookaheadDepthError: If k is negative or not below lookahead_depth
        """
        if k < 0 or k >= self.lookahead_depth:
            raise LookaheadDepthError(
                ErrorTemplate.lookahead_depth_exceeded(k, self.lookahead_depth)
            )
        index = self.position + k
        if index < len(self.tokens):
            return self.tokens[index]
        return self.eof

    def advance(self) -> "TokenStream":
        """Return a stream positioned one token further.

        At end of input this returns self, or raises when strict_end is set.

        Raises:
            StreamExhaustedError: If strict_end and already at end
        """
        if self.at_end:
            if self.strict_end:
                raise StreamExhaustedError(ErrorTemplate.stream_exhausted(self.position))
            return self
        return TokenStream(
            self.tokens,
            self.eof,
            self.position + 1,
            self.lookahead_depth,
            self.strict_end,
        )

    def __repr__(self) -> str:
        return (
            f"TokenStream(position={self.position}/{len(self.tokens)}, "
            f"current={self.peek(0)})"
        )
