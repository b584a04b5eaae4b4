"""Shared constants for purelex.

Centralized defaults used by the configuration layer, the parser entry
point and the recursion guards. Placing them here avoids circular imports
between ``syntax`` and ``core``.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Lookahead
    "DEFAULT_LOOKAHEAD_DEPTH",
    # Depth limits
    "MAX_DEPTH",
    "RECURSION_RESERVE_FRAMES",
    "TRAVERSAL_FRAMES_PER_LEVEL",
    # Input limits
    "MAX_SOURCE_SIZE",
]

# ============================================================================
# LOOKAHEAD
# ============================================================================

# Number of tokens a grammar rule may inspect with TokenStream.peek().
# 1 means peek(0) only (LL(1) style disambiguation).
DEFAULT_LOOKAHEAD_DEPTH: int = 1

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Default DepthGuard limit.
# The parser itself is unbounded by default (ParserConfig.max_depth=None).
MAX_DEPTH: int = 100

# Stack frames kept free when clamping a requested depth against
# sys.getrecursionlimit().
RECURSION_RESERVE_FRAMES: int = 50

# Upper bound on Python frames the visitor and serializer spend per tree
# level. Every grammar level costs the parser at least four frames, so a
# traversal limit derived from this covers any tree the parser can build
# under the same recursion limit.
TRAVERSAL_FRAMES_PER_LEVEL: int = 3

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters (10 MiB).
MAX_SOURCE_SIZE: int = 10 * 1024 * 1024
