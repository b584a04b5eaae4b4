"""Enumerations for purelex type-safe constants.

Uses StrEnum so members compare equal to their string values and render
without the ``ClassName.MEMBER`` repr.

Python 3.13+.
"""

from enum import StrEnum


class TieBreak(StrEnum):
    """How ``alternative`` picks between branches that both succeed."""

    FIRST_MATCH = "first_match"
    """First successful branch wins (ordered choice)."""

    LONGEST_PARSE = "longest_parse"
    """Every branch runs; the one that consumed the most tokens wins."""


class FailureReport(StrEnum):
    """Which failure ``alternative`` reports when every branch fails."""

    FURTHEST = "furthest"
    """Failure with the greatest token index; equal indices merge."""

    FIRST = "first"
    """Failure of the first branch."""


class FailureKind(StrEnum):
    """Stage that produced a failure value."""

    LEX = "lex"
    PARSE = "parse"


class PrefixOperator(StrEnum):
    """Unary operators of the expression grammar."""

    MINUS = "-"
    NOT = "!"


class InfixOperator(StrEnum):
    """Binary operators of the expression grammar."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    LESS_THAN = "<"
    GREATER_THAN = ">"
    EQUAL = "=="
    NOT_EQUAL = "!="


__all__ = [
    "FailureKind",
    "FailureReport",
    "InfixOperator",
    "PrefixOperator",
    "TieBreak",
]
