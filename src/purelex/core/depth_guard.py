"""Depth limiting for recursion protection.

Provides reusable depth tracking to prevent stack overflow from:
- Deep trees in visitor traversal and serialization
- Programmatically constructed trees that bypass the parser's own limit

Also clamps requested depth limits against the interpreter's recursion
limit so a configured maximum never promises more than the call stack
can deliver.

Thread-safe: uses explicit state, no thread-local storage.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from purelex.constants import MAX_DEPTH, RECURSION_RESERVE_FRAMES, TRAVERSAL_FRAMES_PER_LEVEL
from purelex.diagnostics import DepthLimitExceededError
from purelex.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp", "traversal_depth_limit"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage:
        guard = DepthGuard(max_depth=50)
        with guard:
            self._visit_children(node)

    Mutability Note:
        Intentionally mutable to track depth via the context manager
        protocol. Each traversal owns its own guard; parsing does not use
        this class (the parser threads an immutable ParseContext instead).

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Checks the limit BEFORE incrementing: __exit__ does not run when
        __enter__ raises, so incrementing first would leave the guard
        permanently elevated.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(
                ErrorTemplate.tree_depth_exceeded(self.max_depth)
            )
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Current depth (alias for current_depth)."""
        return self.current_depth

    def is_exceeded(self) -> bool:
        """Check if depth limit has been reached."""
        return self.current_depth >= self.max_depth


def depth_clamp(requested_depth: int, reserve_frames: int = RECURSION_RESERVE_FRAMES) -> int:
    """Clamp requested depth against Python recursion limit.

    Logs a warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for call overhead (default: 50)

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(200)
        >>> depth_clamp(100)
        100
        >>> depth_clamp(500)
        150
    """
    max_safe_depth = sys.getrecursionlimit() - reserve_frames
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth


def traversal_depth_limit(frames_per_level: int = TRAVERSAL_FRAMES_PER_LEVEL) -> int:
    """Default tree traversal depth for the current recursion limit.

    Parsing spends more frames per tree level than traversal does, so any
    tree the parser returned can be walked within this limit. Deeper trees
    (built by hand) raise DepthLimitExceededError instead of RecursionError.

    Args:
        frames_per_level: Frames one traversal level may use (default: 3)

    Returns:
        Maximum depth, never below MAX_DEPTH

    Example:
        >>> import sys
        >>> sys.setrecursionlimit(1000)
        >>> traversal_depth_limit()
        316
    """
    available = sys.getrecursionlimit() - RECURSION_RESERVE_FRAMES
    return max(MAX_DEPTH, available // frames_per_level)
