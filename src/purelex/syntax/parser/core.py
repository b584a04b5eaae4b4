"""Parser entry point.

This module provides the Parser class that drives the whole pipeline::

    source -> Cursor -> Tokenizer -> TokenStream -> entry rule -> tree

Architecture:
    The Parser owns no position. Tokenizing threads a
    :class:`~purelex.syntax.cursor.Cursor` through
    :meth:`~purelex.syntax.tokenizer.Tokenizer.tokenize_next`; parsing threads a
    :class:`~purelex.syntax.stream.TokenStream` through the entry rule. Each
    step returns a new value, so one Parser can be reused for any number of
    inputs.

Failures:
    :meth:`Parser.parse` returns a LexFailure or ParseFailure value instead
    of raising. :meth:`Parser.parse_or_raise` is the exception-based wrapper.

Security:
    Includes configurable input size limit to prevent DoS attacks via
    unbounded memory allocation, and an optional nesting depth limit.
"""

import logging

from purelex.config import ParserConfig
from purelex.diagnostics import ErrorTemplate, PurelexSyntaxError
from purelex.syntax.results import LexFailure, ParseFailure
from purelex.syntax.stream import TokenStream
from purelex.syntax.token import Token
from purelex.syntax.tokenizer import Lexicon, Tokenizer

from .combinators import Rule, sequence
from .context import ParseContext
from .primitives import end_of_input

__all__ = ["Parser"]

logger = logging.getLogger(__name__)


class Parser[T]:
    """Recursive-descent parser over an immutable token stream.

    Design:
    - Every rule takes a TokenStream (immutable) and returns a new one
    - Backtracking is retrying with the stream already in hand
    - Failures are values carrying position, expected kinds and found kind

    Security:
    - Configurable max_source_size rejects oversized input up front
    - Configurable max_depth turns runaway nesting into a failure value

    Attributes:
        config: Options shared by tokenizer, stream and combinators
        lexicon: Token pattern table
    """

    __slots__ = ("_config", "_entry", "_lexicon", "_tokenizer")

    def __init__(
        self,
        lexicon: Lexicon,
        entry: Rule[T],
        *,
        config: ParserConfig | None = None,
    ) -> None:
        """Initialize parser.

        Args:
            lexicon: Token pattern table for the language
            entry: Rule that must match the whole input
            config: Parser options (default: ``ParserConfig()``)
        """
        self._config = config if config is not None else ParserConfig()
        self._lexicon = lexicon
        self._entry = sequence(entry, end_of_input, build=lambda tree, _end: tree)
        self._tokenizer = Tokenizer(lexicon, emit_trivia=self._config.emit_trivia)

    @property
    def config(self) -> ParserConfig:
        """Options this parser was built with."""
        return self._config

    @property
    def lexicon(self) -> Lexicon:
        """Token pattern table."""
        return self._lexicon

    def _check_size(self, source: str) -> None:
        max_size = self._config.max_source_size
        if max_size > 0 and len(source) > max_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), max_size)
            raise ValueError(diagnostic.format_error())

    def tokenize(self, source: str) -> tuple[Token, ...] | LexFailure:
        """Tokenize source with this parser's lexicon and trivia setting.

        Raises:
            ValueError: If source exceeds max_source_size
        """
        self._check_size(source)
        return self._tokenizer.tokenize(source)

    def stream(self, source: str) -> TokenStream | LexFailure:
        """Tokenize source into a TokenStream ready for the entry rule.

        Raises:
            ValueError: If source exceeds max_source_size
        """
        tokens = self.tokenize(source)
        if isinstance(tokens, LexFailure):
            return tokens
        return TokenStream.from_tokens(
            tokens,
            lookahead_depth=self._config.lookahead_depth,
            strict_end=self._config.strict_end,
        )

    def parse(self, source: str) -> T | LexFailure | ParseFailure:
        """Parse source into a syntax tree.

        Args:
            source: Text to parse

        Returns:
            The tree built by the entry rule, or the first LexFailure, or
            the ParseFailure at the furthest position the parser reached.
            Input nested deeper than the call stack allows yields a fatal
            MAX_DEPTH_EXCEEDED failure, never a RecursionError.

        Raises:
            ValueError: If source exceeds max_source_size (DoS prevention)

        Example:
            >>> parser = Parser(LEXICON, parse_program)
            >>> program = parser.parse("let x = 1 + 2;")
            >>> program.statements[0].name.name
            'x'
        """
        stream = self.stream(source)
        if isinstance(stream, LexFailure):
            return stream

        try:
            outcome = self._entry(stream, ParseContext(self._config))
        except RecursionError:
            # Entry rules without any nested() step have no closer catch point
            outcome = ParseFailure.depth_exceeded(stream, self._config.max_depth or 0)
        if isinstance(outcome, ParseFailure):
            logger.debug("Parse failed at %s: %s", outcome.position, outcome.message)
            return outcome
        logger.debug("Parsed %d tokens", len(stream.tokens))
        return outcome.value  # type: ignore[return-value]

    def parse_or_raise(self, source: str) -> T:
        """Parse source, raising on failure.

        Raises:
            PurelexSyntaxError: Carrying the LexFailure or ParseFailure
            ValueError: If source exceeds max_source_size
        """
        result = self.parse(source)
        if isinstance(result, LexFailure | ParseFailure):
            raise PurelexSyntaxError(result)
        return result
