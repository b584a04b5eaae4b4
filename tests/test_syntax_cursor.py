"""Tests for the immutable character cursor and position helpers."""

from __future__ import annotations

import pytest

from purelex.syntax.cursor import Cursor, peek_char
from purelex.syntax.position import Position, format_position, position_at

# ============================================================================
# CURSOR BASICS
# ============================================================================


class TestCursorBasic:
    """Test construction and read-only properties."""

    def test_start_at_origin(self) -> None:
        """Cursor.start() begins at offset 0, line 1, column 1."""
        cursor = Cursor.start("hello")

        assert cursor.pos == 0
        assert cursor.offset == 0
        assert cursor.position == Position(0, 1, 1)
        assert cursor.remaining == "hello"

    def test_cursor_immutability(self) -> None:
        """Cursor is a frozen dataclass."""
        cursor = Cursor.start("hello")

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_current_character(self) -> None:
        assert Cursor("hello", 1).current == "e"

    def test_current_at_eof_raises(self) -> None:
        """current raises EOFError instead of returning None."""
        cursor = Cursor.start("")

        assert cursor.is_eof
        with pytest.raises(EOFError, match="Unexpected end of input"):
            _ = cursor.current

    def test_remaining_is_suffix(self) -> None:
        assert Cursor("hello", 3).remaining == "lo"
        assert Cursor("hello", 5).remaining == ""


# ============================================================================
# ADVANCE
# ============================================================================


class TestCursorAdvance:
    """Test advance() and incremental line/column tracking."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor untouched."""
        cursor = Cursor.start("abc")
        later = cursor.advance(2)

        assert cursor.pos == 0
        assert later.pos == 2
        assert later.column == 3

    def test_advance_over_newline(self) -> None:
        """Consuming a newline starts a new line at column 1."""
        cursor = Cursor.start("ab\ncd").advance(3)

        assert cursor.position == Position(3, 2, 1)

    def test_advance_multiple_lines_at_once(self) -> None:
        cursor = Cursor.start("a\nb\ncde").advance(6)

        assert (cursor.line, cursor.column) == (3, 3)

    def test_crlf_counts_as_one_line_break(self) -> None:
        cursor = Cursor.start("a\r\nb").advance(3)

        assert (cursor.line, cursor.column) == (2, 1)

    def test_cr_alone_is_not_a_line_break(self) -> None:
        cursor = Cursor.start("a\rb").advance(3)

        assert (cursor.line, cursor.column) == (1, 4)

    def test_advance_clamps_at_end(self) -> None:
        """Advancing past the end stops at len(source)."""
        cursor = Cursor.start("ab").advance(10)

        assert cursor.pos == 2
        assert cursor.is_eof

    def test_advance_zero_is_identity_in_value(self) -> None:
        cursor = Cursor("abc", 1, 1, 2)

        assert cursor.advance(0) == cursor

    def test_negative_advance_rejected(self) -> None:
        with pytest.raises(ValueError, match="advance count"):
            Cursor.start("abc").advance(-1)


# ============================================================================
# PEEK AND SLICES
# ============================================================================


class TestCursorPeek:
    """Test lookahead without consumption."""

    def test_peek_current_and_ahead(self) -> None:
        cursor = Cursor.start("abc")

        assert cursor.peek() == "a"
        assert cursor.peek(2) == "c"

    def test_peek_past_end_is_none(self) -> None:
        assert Cursor.start("abc").peek(3) is None

    def test_peek_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="peek offset"):
            Cursor.start("abc").peek(-1)

    def test_peek_char_does_not_move_cursor(self) -> None:
        cursor = Cursor.start("xyz")

        assert peek_char(cursor, 1) == "y"
        assert cursor.pos == 0

    def test_slices(self) -> None:
        cursor = Cursor("hello world", 6)

        assert cursor.slice_to(9) == "wor"
        assert cursor.slice_ahead(3) == "wor"
        assert cursor.slice_ahead(100) == "world"


# ============================================================================
# POSITION HELPERS
# ============================================================================


class TestPosition:
    """Test Position validation and recomputation."""

    def test_str_is_line_colon_column(self) -> None:
        assert str(Position(4, 2, 3)) == "2:3"

    def test_positions_order_by_offset(self) -> None:
        assert Position(1, 1, 2) < Position(5, 2, 1)

    @pytest.mark.parametrize(
        ("offset", "line", "column"),
        [(-1, 1, 1), (0, 0, 1), (0, 1, 0)],
    )
    def test_invalid_position_rejected(self, offset: int, line: int, column: int) -> None:
        with pytest.raises(ValueError, match="Position"):
            Position(offset, line, column)

    def test_position_at(self) -> None:
        assert position_at("ab\ncd", 4) == Position(4, 2, 2)
        assert position_at("ab\ncd", 0) == Position(0, 1, 1)

    def test_position_at_clamps_offset(self) -> None:
        assert position_at("ab", 10) == Position(2, 1, 3)

    def test_format_position(self) -> None:
        assert format_position("hello\nworld", 6) == "2:1"
