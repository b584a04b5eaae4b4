"""Source positions for tokens, nodes and failures.

A Position is the (offset, line, column) triple recorded by the Cursor as it
advances. Helpers recompute a Position from a raw offset, which is useful
in tests and for tooling that only stored offsets.

Line/column are 1-based like text editors. ``\\n`` is the line delimiter;
CRLF works because the ``\\n`` is still present.
"""

from dataclasses import dataclass

__all__ = ["Position", "format_position", "position_at"]


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Location in the character input.

    Attributes:
        offset: Characters consumed from the start of the input (0-based)
        line: Line number (1-based)
        column: Column number (1-based)

    Ordering compares offset first, so positions sort in source order.
    """

    offset: int
    line: int = 1
    column: int = 1

    def __post_init__(self) -> None:
        """Validate position invariants."""
        if self.offset < 0:
            msg = f"Position offset must be >= 0, got {self.offset}"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"Position line must be >= 1, got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"Position column must be >= 1, got {self.column}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


def position_at(source: str, offset: int) -> Position:
    """Compute the Position of an offset from scratch.

    O(n) in offset. The Cursor tracks line/column incrementally, so this is
    only needed when nothing but an offset is at hand.

    Args:
        source: Complete source text
        offset: Character offset (clamped to len(source))

    Returns:
        Position for the offset

    Example:
        >>> position_at("ab\\ncd", 4)
        Position(offset=4, line=2, column=2)
    """
    if offset < 0:
        msg = f"Position must be >= 0, got {offset}"
        raise ValueError(msg)
    offset = min(offset, len(source))
    line = source.count("\n", 0, offset) + 1
    last_newline = source.rfind("\n", 0, offset)
    column = offset - last_newline if last_newline >= 0 else offset + 1
    return Position(offset, line, column)


def format_position(source: str, offset: int) -> str:
    """Format an offset as a "line:column" string.

    Example:
        >>> format_position("hello\\nworld", 6)
        '2:1'
    """
    return str(position_at(source, offset))
