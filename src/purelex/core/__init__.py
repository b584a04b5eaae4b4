"""Core utilities shared across the syntax layer and its consumers.

Exports:
    DepthGuard: Context manager for recursion depth limiting
    depth_clamp: Clamp a depth limit against the interpreter recursion limit
    traversal_depth_limit: Default depth for visitor and serializer walks

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp, traversal_depth_limit

__all__ = ["DepthGuard", "depth_clamp", "traversal_depth_limit"]
