"""Parser configuration.

Provides a single frozen dataclass holding every option recognized by the
tokenizer, the token stream and the combinators. One object travels from
``Parser`` into the ``ParseContext`` threaded through each rule.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from purelex.constants import DEFAULT_LOOKAHEAD_DEPTH, MAX_SOURCE_SIZE
from purelex.core.depth_guard import depth_clamp
from purelex.enums import FailureReport, TieBreak

__all__ = ["ParserConfig"]


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Immutable configuration for tokenizing and parsing.

    All fields have defaults; ``ParserConfig()`` is a usable configuration.

    Attributes:
        emit_trivia: Emit whitespace/comment tokens from the tokenizer
            (default: False). The token stream still skips them.
        lookahead_depth: Number of tokens rules may peek at (default: 1,
            meaning ``peek(0)`` only).
        max_depth: Maximum rule nesting depth, or None for unbounded
            (default). Clamped against the interpreter recursion limit.
            Input that exhausts the call stack first fails with the same
            fatal MAX_DEPTH_EXCEEDED failure.
        tie_break: How ``alternative`` chooses among successful branches.
        failure_report: Which failure ``alternative`` reports when every
            branch fails.
        strict_end: Raise StreamExhaustedError when advancing a stream that
            is already at end of input (default: False, advance is a no-op).
        max_source_size: Maximum source length in characters (default:
            10 MiB). 0 disables the check.

    Example:
        >>> config = ParserConfig(max_depth=64, tie_break=TieBreak.LONGEST_PARSE)
        >>> config.lookahead_depth
        1
    """

    emit_trivia: bool = False
    lookahead_depth: int = DEFAULT_LOOKAHEAD_DEPTH
    max_depth: int | None = None
    tie_break: TieBreak = TieBreak.FIRST_MATCH
    failure_report: FailureReport = FailureReport.FURTHEST
    strict_end: bool = False
    max_source_size: int = MAX_SOURCE_SIZE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If lookahead_depth or max_depth is not positive, or
                max_source_size is negative.
        """
        if self.lookahead_depth < 1:
            msg = f"lookahead_depth must be >= 1, got {self.lookahead_depth}"
            raise ValueError(msg)
        if self.max_depth is not None:
            if self.max_depth < 1:
                msg = f"max_depth must be >= 1 or None, got {self.max_depth}"
                raise ValueError(msg)
            object.__setattr__(self, "max_depth", depth_clamp(self.max_depth))
        if self.max_source_size < 0:
            msg = f"max_source_size must be >= 0, got {self.max_source_size}"
            raise ValueError(msg)
        object.__setattr__(self, "tie_break", TieBreak(self.tie_break))
        object.__setattr__(self, "failure_report", FailureReport(self.failure_report))
