"""Diagnostic system for purelex errors.

Provides structured diagnostics with codes, positions and hints, plus the
exception hierarchy used for misuse and the raising entry point.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DepthLimitExceededError,
    LookaheadDepthError,
    PurelexError,
    PurelexSyntaxError,
    StreamExhaustedError,
)
from .templates import ErrorTemplate, describe_expected

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "LookaheadDepthError",
    "PurelexError",
    "PurelexSyntaxError",
    "StreamExhaustedError",
    "describe_expected",
]
