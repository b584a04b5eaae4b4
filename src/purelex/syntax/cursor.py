"""Immutable cursor over the character input.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns a NEW cursor; forgetting to rebind the result
      means no progress, never a corrupted shared position
    - Line and column are carried along and updated incrementally, so every
      token gets its position without rescanning the source

Line Ending Support:
    - LF (\\n): line delimiter
    - CRLF (\\r\\n): supported (the \\n still ends the line)
    - CR-only (\\r): NOT a line break
"""

from dataclasses import dataclass

from purelex.diagnostics import ErrorTemplate

from .position import Position

__all__ = ["Cursor", "peek_char"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Invariant: ``pos`` equals the number of characters consumed from the
    original input and ``remaining`` is exactly ``source[pos:]``.

    Example:
        >>> cursor = Cursor.start("hi\\nthere")
        >>> cursor.current
        'h'
        >>> later = cursor.advance(3)
        >>> (later.pos, later.line, later.column)
        (3, 2, 1)
        >>> cursor.pos  # Original unchanged
        0
    """

    source: str
    pos: int = 0
    line: int = 1
    column: int = 1

    @classmethod
    def start(cls, source: str) -> "Cursor":
        """Create the cursor at the beginning of source."""
        return cls(source, 0, 1, 1)

    @property
    def offset(self) -> int:
        """Characters consumed so far (alias for pos)."""
        return self.pos

    @property
    def remaining(self) -> str:
        """Unconsumed suffix of the input.

        Copies the suffix; prefer peek()/slice_ahead() in loops.
        """
        return self.source[self.pos :]

    @property
    def position(self) -> Position:
        """Current location as a Position value."""
        return Position(self.pos, self.line, self.column)

    @property
    def is_eof(self) -> bool:
        """True if every character has been consumed."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input

        Use ``is_eof`` to guard loops; ``current`` is always a str, never None.
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.position, ())
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Inspect the character at pos + offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        if offset < 0:
            msg = f"peek offset must be >= 0, got {offset}"
            raise ValueError(msg)
        target = self.pos + offset
        if target >= len(self.source):
            return None
        return self.source[target]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count characters.

        Line and column are updated from the consumed span; the original
        cursor is unchanged.

        Example:
            >>> cursor = Cursor.start("ab\\ncd")
            >>> cursor.advance(4).position
            Position(offset=4, line=2, column=2)
        """
        if count < 0:
            msg = f"advance count must be >= 0, got {count}"
            raise ValueError(msg)
        end = min(self.pos + count, len(self.source))
        newlines = self.source.count("\n", self.pos, end)
        if newlines:
            last_newline = self.source.rfind("\n", self.pos, end)
            return Cursor(self.source, end, self.line + newlines, end - last_newline)
        return Cursor(self.source, end, self.line, self.column + (end - self.pos))

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get up to n characters from the current position without advancing."""
        return self.source[self.pos : self.pos + n]


def peek_char(cursor: Cursor, k: int = 0) -> str | None:
    """Character k places ahead of cursor, or None past the end.

    Pure inspection: no new cursor is produced for the caller to keep.
    """
    return cursor.peek(k)
