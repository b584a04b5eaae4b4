"""Explicit context threaded alongside the token stream.

Replaces a mutable depth counter with a value passed into every rule:
entering a nested rule builds a new context one level deeper, leaving the
caller's context untouched, so abandoned attempts need no cleanup.
"""

from dataclasses import dataclass, field

from purelex.config import ParserConfig

__all__ = ["ParseContext"]


@dataclass(frozen=True, slots=True)
class ParseContext:
    """Configuration plus current nesting depth.

    Attributes:
        config: Options consulted by combinators (tie-break, failure report,
            depth limit)
        depth: Number of ``nested`` rules currently entered (0 = top level)
    """

    config: ParserConfig = field(default_factory=ParserConfig)
    depth: int = 0

    def is_depth_exceeded(self) -> bool:
        """Check if entering one more nested rule would exceed max_depth."""
        max_depth = self.config.max_depth
        return max_depth is not None and self.depth >= max_depth

    def enter(self) -> "ParseContext":
        """Create new context with incremented depth."""
        return ParseContext(self.config, self.depth + 1)
