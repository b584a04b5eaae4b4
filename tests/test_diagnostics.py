"""Tests for diagnostic codes, templates and the exception hierarchy."""

from __future__ import annotations

import pytest

from purelex.diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    LookaheadDepthError,
    PurelexError,
    PurelexSyntaxError,
    StreamExhaustedError,
    describe_expected,
)
from purelex.syntax import ParseFailure, parse
from purelex.syntax.position import Position


class TestDescribeExpected:
    """Test rendering of expected-kind sets."""

    @pytest.mark.parametrize(
        ("kinds", "text"),
        [
            ((), "nothing"),
            (("RPAREN",), "RPAREN"),
            (("NUM", "IDENT"), "IDENT or NUM"),
            (("C", "A", "B"), "A, B or C"),
        ],
    )
    def test_sorted_rendering(self, kinds: tuple[str, ...], text: str) -> None:
        assert describe_expected(kinds) == text


class TestDiagnostic:
    """Test Diagnostic formatting."""

    def test_format_with_position_and_hint(self) -> None:
        diagnostic = ErrorTemplate.unexpected_eof(Position(4, 1, 5), {"RPAREN"})

        assert diagnostic.format_error() == (
            "error[UNEXPECTED_EOF]: Unexpected end of input, expected RPAREN\n"
            "  --> line 1, column 5\n"
            "  = help: The input appears to be truncated"
        )

    def test_format_without_position(self) -> None:
        diagnostic = Diagnostic(DiagnosticCode.STREAM_EXHAUSTED, "done")

        assert diagnostic.format_error() == "error[STREAM_EXHAUSTED]: done"
        assert str(diagnostic) == "done"

    def test_codes_grouped_by_range(self) -> None:
        assert 1000 <= DiagnosticCode.UNEXPECTED_CHARACTER.value < 2000
        assert 2000 <= DiagnosticCode.MAX_DEPTH_EXCEEDED.value < 3000
        assert 3000 <= DiagnosticCode.LOOKAHEAD_DEPTH_EXCEEDED.value < 4000
        assert 4000 <= DiagnosticCode.UNSUPPORTED_NODE.value < 5000

    def test_source_too_large_message(self) -> None:
        diagnostic = ErrorTemplate.source_too_large(2048, 1024)

        assert diagnostic.message == (
            "Source size (2,048 characters) exceeds maximum (1,024 characters)"
        )


class TestExceptions:
    """Test the exception hierarchy."""

    def test_plain_message(self) -> None:
        error = PurelexError("boom")

        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_diagnostic_message(self) -> None:
        diagnostic = ErrorTemplate.tree_depth_exceeded(7)
        error = DepthLimitExceededError(diagnostic)

        assert error.diagnostic is diagnostic
        assert "Maximum tree depth (7) exceeded" in str(error)

    def test_builtin_bases(self) -> None:
        assert issubclass(LookaheadDepthError, ValueError)
        assert issubclass(StreamExhaustedError, IndexError)
        assert issubclass(PurelexSyntaxError, PurelexError)

    def test_syntax_error_carries_failure(self) -> None:
        failure = parse("let")
        assert isinstance(failure, ParseFailure)

        error = PurelexSyntaxError(failure)

        assert error.failure is failure
        assert error.diagnostic == failure.diagnostic
