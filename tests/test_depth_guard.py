"""Tests for core/depth_guard.py.

Tests the DepthGuard context manager and depth_clamp(), with Hypothesis
for the balance property.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from purelex.constants import MAX_DEPTH, RECURSION_RESERVE_FRAMES, TRAVERSAL_FRAMES_PER_LEVEL
from purelex.core.depth_guard import DepthGuard, depth_clamp, traversal_depth_limit
from purelex.diagnostics import DepthLimitExceededError, DiagnosticCode

# ============================================================================
# Construction
# ============================================================================


class TestDepthGuardConstruction:
    """Test DepthGuard construction and defaults."""

    def test_default_construction(self) -> None:
        guard = DepthGuard()

        assert guard.max_depth == MAX_DEPTH
        assert guard.current_depth == 0
        assert guard.depth == 0

    def test_post_init_clamps_max_depth(self) -> None:
        """__post_init__ clamps max_depth against recursion limit."""
        limit = sys.getrecursionlimit()
        guard = DepthGuard(max_depth=limit + 1000)

        assert guard.max_depth == limit - RECURSION_RESERVE_FRAMES


# ============================================================================
# Context Manager
# ============================================================================


class TestDepthGuardContextManager:
    """Test DepthGuard as context manager."""

    def test_nested(self) -> None:
        guard = DepthGuard(max_depth=10)

        with guard:
            assert guard.current_depth == 1
            with guard:
                assert guard.current_depth == 2

        assert guard.current_depth == 0

    def test_raises_on_exceeded(self) -> None:
        guard = DepthGuard(max_depth=3)

        with guard, guard, guard:  # noqa: SIM117
            assert guard.is_exceeded()
            with pytest.raises(DepthLimitExceededError) as exc_info:
                with guard:
                    pass

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.TREE_DEPTH_EXCEEDED
        assert "3" in str(exc_info.value)

    def test_depth_restored_on_error(self) -> None:
        guard = DepthGuard(max_depth=10)
        test_error_msg = "Test error"

        with guard:
            try:
                with guard:
                    raise ValueError(test_error_msg)
            except ValueError:
                pass
            assert guard.current_depth == 1

        assert guard.current_depth == 0

    def test_state_not_corrupted_on_enter_failure(self) -> None:
        """current_depth unchanged when __enter__ raises."""
        guard = DepthGuard(max_depth=2)

        with guard, guard:
            with pytest.raises(DepthLimitExceededError), guard:
                pass
            assert guard.current_depth == 2

        assert guard.current_depth == 0

    def test_returns_self(self) -> None:
        guard = DepthGuard()

        with guard as entered:
            assert entered is guard

    @given(levels=st.integers(min_value=0, max_value=40))
    def test_balanced_after_any_nesting(self, levels: int) -> None:
        """PROPERTY: depth returns to 0 however deep the nesting went."""
        guard = DepthGuard(max_depth=20)

        def descend(remaining: int) -> None:
            if remaining == 0:
                return
            with guard:
                descend(remaining - 1)

        if levels > 20:
            with pytest.raises(DepthLimitExceededError):
                descend(levels)
        else:
            descend(levels)

        assert guard.current_depth == 0


# ============================================================================
# depth_clamp
# ============================================================================


class TestDepthClamp:
    """Test clamping against the interpreter recursion limit."""

    def test_within_limit_unchanged(self) -> None:
        assert depth_clamp(10) == 10

    def test_clamped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        limit = sys.getrecursionlimit()

        with caplog.at_level(logging.WARNING, logger="purelex.core.depth_guard"):
            result = depth_clamp(limit * 2)

        assert result == limit - RECURSION_RESERVE_FRAMES
        assert "Clamping" in caplog.text

    def test_custom_reserve(self) -> None:
        limit = sys.getrecursionlimit()

        assert depth_clamp(limit, reserve_frames=100) == limit - 100


# ============================================================================
# Traversal limit
# ============================================================================


class TestTraversalDepthLimit:
    """Test the default depth used by the visitor and serializer."""

    def test_derived_from_recursion_limit(self) -> None:
        available = sys.getrecursionlimit() - RECURSION_RESERVE_FRAMES

        assert traversal_depth_limit() == max(
            MAX_DEPTH, available // TRAVERSAL_FRAMES_PER_LEVEL
        )

    def test_follows_raised_recursion_limit(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "getrecursionlimit", lambda: 10_050)

        assert traversal_depth_limit(frames_per_level=4) == 2500

    def test_never_below_default_guard(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(sys, "getrecursionlimit", lambda: 100)

        assert traversal_depth_limit() == MAX_DEPTH
