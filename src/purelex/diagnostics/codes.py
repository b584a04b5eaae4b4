"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by failure
values and exceptions.
Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from purelex.syntax.position import Position

__all__ = ["Diagnostic", "DiagnosticCode"]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lexical errors (character level)
        2000-2999: Syntax errors (token level)
        3000-3999: Usage errors (misconfigured grammar or parser)
        4000-4999: Tree processing errors (visitor, serializer)
    """

    # Lexical errors (1000-1999)
    UNEXPECTED_CHARACTER = 1001

    # Syntax errors (2000-2999)
    UNEXPECTED_TOKEN = 2001
    UNEXPECTED_EOF = 2002
    MAX_DEPTH_EXCEEDED = 2003

    # Usage errors (3000-3999)
    LOOKAHEAD_DEPTH_EXCEEDED = 3001
    STREAM_EXHAUSTED = 3002
    SOURCE_TOO_LARGE = 3003

    # Tree processing errors (4000-4999)
    TREE_DEPTH_EXCEEDED = 4001
    UNSUPPORTED_NODE = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        position: Source location (None for errors not tied to input)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    position: Position | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic as a compact multi-line report.

        Example output:
            error[UNEXPECTED_TOKEN]: Expected RPAREN but found EOF
              --> line 1, column 5
              = help: Close the group with ')'

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(
                f"  --> line {self.position.line}, column {self.position.column}"
            )
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
