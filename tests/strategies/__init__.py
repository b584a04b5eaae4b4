"""Hypothesis strategies for the purelex test suite."""

from .syntax import (
    IDENTIFIER_NAMES,
    chain_sources,
    deep_nesting_sources,
    expression_sources,
    identifiers,
    program_sources,
    statement_sources,
)

__all__ = [
    "IDENTIFIER_NAMES",
    "chain_sources",
    "deep_nesting_sources",
    "expression_sources",
    "identifiers",
    "program_sources",
    "statement_sources",
]
