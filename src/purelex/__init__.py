"""purelex - State-threading lexer and recursive-descent parser.

Every stage passes immutable position values in and out instead of
advancing hidden mutable cursors: the tokenizer threads a Cursor, the
parser threads a TokenStream, and failures come back as values.

Public API:
    Parser - Entry point from source text to syntax tree
    ParserConfig - Options for tokenizer, stream and combinators
    parse - Parse a program of the bundled expression language
    serialize - Render a syntax tree back to source text

Exceptions:
    PurelexError - Base exception class
    PurelexSyntaxError - Raised by Parser.parse_or_raise
    LookaheadDepthError - Peek outside the configured lookahead window
    StreamExhaustedError - Advance past end on a strict stream
    DepthLimitExceededError - Tree traversal too deep

Submodules:
    purelex.syntax - Cursor, tokenizer, token stream, tree, serializer
    purelex.syntax.parser - Combinators and the example grammar
    purelex.diagnostics - Diagnostic codes, templates and exceptions
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .config import ParserConfig
from .diagnostics import (
    DepthLimitExceededError,
    LookaheadDepthError,
    PurelexError,
    PurelexSyntaxError,
    StreamExhaustedError,
)
from .enums import FailureReport, TieBreak
from .syntax import LexFailure, ParseFailure, Parser, parse, serialize

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("purelex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DepthLimitExceededError",
    "FailureReport",
    "LexFailure",
    "LookaheadDepthError",
    "ParseFailure",
    "Parser",
    "ParserConfig",
    "PurelexError",
    "PurelexSyntaxError",
    "StreamExhaustedError",
    "TieBreak",
    "__version__",
    "parse",
    "serialize",
]
