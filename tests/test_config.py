"""Tests for ParserConfig validation and defaults."""

from __future__ import annotations

import dataclasses
import logging
import sys

import pytest

from purelex.config import ParserConfig
from purelex.constants import MAX_SOURCE_SIZE, RECURSION_RESERVE_FRAMES
from purelex.enums import FailureReport, TieBreak


class TestDefaults:
    """Test the default configuration."""

    def test_defaults(self) -> None:
        config = ParserConfig()

        assert config.emit_trivia is False
        assert config.lookahead_depth == 1
        assert config.max_depth is None
        assert config.tie_break is TieBreak.FIRST_MATCH
        assert config.failure_report is FailureReport.FURTHEST
        assert config.strict_end is False
        assert config.max_source_size == MAX_SOURCE_SIZE

    def test_frozen(self) -> None:
        config = ParserConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_depth = 3  # type: ignore[misc]


class TestValidation:
    """Test __post_init__ validation."""

    @pytest.mark.parametrize(
        ("kwargs", "match"),
        [
            ({"lookahead_depth": 0}, "lookahead_depth"),
            ({"max_depth": 0}, "max_depth"),
            ({"max_source_size": -1}, "max_source_size"),
        ],
    )
    def test_invalid_values(self, kwargs: dict[str, int], match: str) -> None:
        with pytest.raises(ValueError, match=match):
            ParserConfig(**kwargs)  # type: ignore[arg-type]

    def test_enum_coerced_from_string(self) -> None:
        config = ParserConfig(tie_break="longest_parse", failure_report="first")  # type: ignore[arg-type]

        assert config.tie_break is TieBreak.LONGEST_PARSE
        assert config.failure_report is FailureReport.FIRST

    def test_unknown_enum_value_rejected(self) -> None:
        with pytest.raises(ValueError, match="shortest"):
            ParserConfig(tie_break="shortest")  # type: ignore[arg-type]

    def test_max_depth_clamped(self, caplog: pytest.LogCaptureFixture) -> None:
        limit = sys.getrecursionlimit()

        with caplog.at_level(logging.WARNING, logger="purelex"):
            config = ParserConfig(max_depth=limit * 10)

        assert config.max_depth == limit - RECURSION_RESERVE_FRAMES
        assert "exceeds Python recursion limit" in caplog.text

    def test_equal_configs_compare_equal(self) -> None:
        assert ParserConfig(max_depth=8) == ParserConfig(max_depth=8)
