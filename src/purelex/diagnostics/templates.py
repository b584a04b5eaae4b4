"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from .codes import Diagnostic, DiagnosticCode

if TYPE_CHECKING:
    from purelex.syntax.position import Position

__all__ = ["ErrorTemplate", "describe_expected"]


def describe_expected(expected: Iterable[str]) -> str:
    """Render an expected-kind set deterministically ("A, B or C")."""
    kinds = sorted(expected)
    if not kinds:
        return "nothing"
    if len(kinds) == 1:
        return kinds[0]
    return ", ".join(kinds[:-1]) + " or " + kinds[-1]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. No f-strings in exception constructors;
    callers pass the Diagnostic instead.
    """

    @staticmethod
    def unexpected_character(position: Position, character: str) -> Diagnostic:
        """No token pattern matches at position.

        Args:
            position: Where the tokenizer stopped
            character: The character that could not start any token

        Returns:
            Diagnostic for UNEXPECTED_CHARACTER
        """
        msg = f"Unexpected character {character!r}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_CHARACTER,
            message=msg,
            position=position,
            hint="Remove the character or add a token pattern that matches it",
        )

    @staticmethod
    def unexpected_token(
        position: Position, expected: Iterable[str], found: str
    ) -> Diagnostic:
        """Token does not match any alternative of the current rule.

        Args:
            position: Start of the offending token
            expected: Token kinds that would have been accepted
            found: Kind of the token actually present

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        msg = f"Expected {describe_expected(expected)} but found {found}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=msg,
            position=position,
        )

    @staticmethod
    def unexpected_eof(position: Position, expected: Iterable[str]) -> Diagnostic:
        """Input ended while a rule still required tokens.

        Args:
            position: End-of-input position
            expected: Token kinds that would have been accepted

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected end of input, expected {describe_expected(expected)}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            position=position,
            hint="The input appears to be truncated",
        )

    @staticmethod
    def max_depth_exceeded(position: Position, max_depth: int) -> Diagnostic:
        """Nesting depth limit reached while parsing.

        Args:
            position: Start of the token where the limit tripped
            max_depth: Configured maximum depth

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            position=position,
            hint="Reduce nesting or raise ParserConfig.max_depth",
        )

    @staticmethod
    def lookahead_depth_exceeded(offset: int, lookahead_depth: int) -> Diagnostic:
        """Grammar rule peeked further than the configured lookahead.

        Args:
            offset: Requested peek offset
            lookahead_depth: Configured lookahead depth

        Returns:
            Diagnostic for LOOKAHEAD_DEPTH_EXCEEDED
        """
        msg = (
            f"peek({offset}) is outside the configured lookahead "
            f"(0 <= k < {lookahead_depth})"
        )
        return Diagnostic(
            code=DiagnosticCode.LOOKAHEAD_DEPTH_EXCEEDED,
            message=msg,
            hint="Raise ParserConfig.lookahead_depth or restructure the rule",
        )

    @staticmethod
    def stream_exhausted(index: int) -> Diagnostic:
        """advance() called on a strict stream already at end of input.

        Args:
            index: Stream position at the time of the call

        Returns:
            Diagnostic for STREAM_EXHAUSTED
        """
        msg = f"Cannot advance past end of input (position {index})"
        return Diagnostic(code=DiagnosticCode.STREAM_EXHAUSTED, message=msg)

    @staticmethod
    def source_too_large(size: int, max_size: int) -> Diagnostic:
        """Source exceeds the configured size limit.

        Args:
            size: Length of the source in characters
            max_size: Configured limit

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = (
            f"Source size ({size:,} characters) exceeds maximum "
            f"({max_size:,} characters)"
        )
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            hint="Configure ParserConfig.max_source_size to increase the limit",
        )

    @staticmethod
    def tree_depth_exceeded(max_depth: int) -> Diagnostic:
        """Tree traversal went deeper than the guard allows.

        Args:
            max_depth: Maximum traversal depth

        Returns:
            Diagnostic for TREE_DEPTH_EXCEEDED
        """
        msg = f"Maximum tree depth ({max_depth}) exceeded"
        return Diagnostic(code=DiagnosticCode.TREE_DEPTH_EXCEEDED, message=msg)

    @staticmethod
    def unsupported_node(node_type: str) -> Diagnostic:
        """Serializer met a node type it cannot render.

        Args:
            node_type: Class name of the node

        Returns:
            Diagnostic for UNSUPPORTED_NODE
        """
        msg = f"Cannot serialize node of type {node_type}"
        return Diagnostic(code=DiagnosticCode.UNSUPPORTED_NODE, message=msg)
