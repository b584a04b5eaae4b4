"""Token values and token pattern declarations.

Tokens are immutable once produced. A TokenPattern declares one token kind
as a regular expression; the order of patterns in a Lexicon is the
priority used to break equal-length matches.
"""

import re
from dataclasses import dataclass, field
from typing import Final

from .position import Position

__all__ = ["EOF", "Token", "TokenPattern"]

EOF: Final = "EOF"
"""Kind of the end-of-input sentinel token."""


@dataclass(frozen=True, slots=True)
class Token:
    """Classified, positioned lexeme.

    Attributes:
        kind: Token kind tag (a str; grammars typically use a StrEnum)
        lexeme: Exact source text of the token
        start: Position of the first character
        end: Position just past the last character
        trivia: True for whitespace/comment tokens emitted with emit_trivia
    """

    kind: str
    lexeme: str
    start: Position
    end: Position
    trivia: bool = False

    @property
    def is_eof(self) -> bool:
        """True for the end-of-input sentinel."""
        return self.kind == EOF

    def __str__(self) -> str:
        if self.is_eof:
            return EOF
        return f"{self.kind}({self.lexeme!r})"

    @classmethod
    def end_of_input(cls, position: Position) -> "Token":
        """Build the end-of-input sentinel at position."""
        return cls(EOF, "", position, position)


@dataclass(frozen=True, slots=True)
class TokenPattern:
    """Declaration of one token kind.

    Attributes:
        kind: Kind assigned to matching lexemes
        pattern: Regular expression, or literal text when literal=True
        trivia: Skipped by the tokenizer unless emit_trivia is enabled
        literal: Treat pattern as plain text rather than a regex

    Example:
        >>> TokenPattern("NUM", r"[0-9]+")
        >>> TokenPattern("PLUS", "+", literal=True)
        >>> TokenPattern("WHITESPACE", r"\\s+", trivia=True)
    """

    kind: str
    pattern: str
    trivia: bool = False
    literal: bool = False
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Compile the pattern once at declaration time."""
        if self.kind == EOF:
            msg = f"Token kind {EOF!r} is reserved for the end-of-input sentinel"
            raise ValueError(msg)
        if not self.pattern:
            msg = f"Token pattern for {self.kind} must not be empty"
            raise ValueError(msg)
        source = re.escape(self.pattern) if self.literal else self.pattern
        object.__setattr__(self, "regex", re.compile(source))

    def match_length(self, source: str, pos: int) -> int:
        """Length of the match at pos, or 0 if the pattern does not match."""
        match = self.regex.match(source, pos)
        if match is None:
            return 0
        return match.end() - pos
