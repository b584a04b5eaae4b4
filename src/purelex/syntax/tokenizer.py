"""Pattern-table tokenizer over immutable cursors.

``tokenize_next`` is a pure function of its cursor: it returns the next
token together with a new cursor, or a LexFailure. Whitespace and comments
declared as trivia are skipped inside the call (the returned cursor is past
them) unless the tokenizer was built with ``emit_trivia=True``.

Matching Policy:
    Every pattern is tried at the cursor. The longest lexeme wins; among
    equal lengths the pattern declared first in the Lexicon wins. Keywords
    therefore need no special casing: declare ``let`` before IDENT and
    "let" lexes as the keyword while "letter" lexes as IDENT.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .cursor import Cursor
from .results import LexFailure, LexResult
from .token import Token, TokenPattern

__all__ = ["Lexicon", "Tokenizer"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Lexicon:
    """Ordered token pattern table.

    Attributes:
        patterns: Token patterns in priority order (earlier wins ties)
    """

    patterns: tuple[TokenPattern, ...]

    def __post_init__(self) -> None:
        """Validate the table is usable."""
        if not self.patterns:
            msg = "Lexicon requires at least one token pattern"
            raise ValueError(msg)
        object.__setattr__(self, "patterns", tuple(self.patterns))

    @classmethod
    def of(cls, patterns: Iterable[TokenPattern]) -> "Lexicon":
        """Build a Lexicon from any iterable of patterns."""
        return cls(tuple(patterns))

    @property
    def kinds(self) -> frozenset[str]:
        """All token kinds the table can produce."""
        return frozenset(pattern.kind for pattern in self.patterns)

    def longest_match(self, cursor: Cursor) -> tuple[TokenPattern, int] | None:
        """Best pattern at cursor and its match length, or None.

        Zero-length matches are ignored; they would never advance the cursor.
        """
        best: tuple[TokenPattern, int] | None = None
        for pattern in self.patterns:
            length = pattern.match_length(cursor.source, cursor.pos)
            if length > 0 and (best is None or length > best[1]):
                best = (pattern, length)
        return best


class Tokenizer:
    """Tokenizer driven by a Lexicon.

    Holds no position: all state lives in the Cursor passed to each call, so
    one Tokenizer can serve any number of inputs, concurrently or not.

    Example:
        >>> tokenizer = Tokenizer(LEXICON)
        >>> result = tokenizer.tokenize_next(Cursor.start("12 + x"))
        >>> result.token.kind, result.cursor.pos
        ('NUM', 2)
    """

    __slots__ = ("_emit_trivia", "_lexicon")

    def __init__(self, lexicon: Lexicon, *, emit_trivia: bool = False) -> None:
        """Initialize tokenizer.

        Args:
            lexicon: Pattern table in priority order
            emit_trivia: Return trivia tokens instead of skipping them
        """
        self._lexicon = lexicon
        self._emit_trivia = emit_trivia

    @property
    def lexicon(self) -> Lexicon:
        """Pattern table used for matching."""
        return self._lexicon

    @property
    def emit_trivia(self) -> bool:
        """Whether trivia tokens are emitted."""
        return self._emit_trivia

    def tokenize_next(self, cursor: Cursor) -> LexResult | LexFailure:
        """Produce the token at cursor and the cursor after it.

        Returns:
            LexResult with the next token (the EOF sentinel when the input
            is exhausted) and the advanced cursor, or LexFailure when no
            pattern matches.
        """
        while not cursor.is_eof:
            match = self._lexicon.longest_match(cursor)
            if match is None:
                return LexFailure(cursor.position, cursor.current)
            pattern, length = match
            after = cursor.advance(length)
            if pattern.trivia and not self._emit_trivia:
                cursor = after
                continue
            token = Token(
                pattern.kind,
                cursor.slice_to(after.pos),
                cursor.position,
                after.position,
                trivia=pattern.trivia,
            )
            return LexResult(token, after)
        return LexResult(Token.end_of_input(cursor.position), cursor)

    def peek_token(self, cursor: Cursor) -> Token | LexFailure:
        """Next token at cursor, discarding the advanced cursor."""
        result = self.tokenize_next(cursor)
        if isinstance(result, LexFailure):
            return result
        return result.token

    def iter_tokens(self, source: str) -> Iterator[Token | LexFailure]:
        """Lazily yield tokens of source, ending with EOF or a LexFailure."""
        cursor = Cursor.start(source)
        while True:
            result = self.tokenize_next(cursor)
            if isinstance(result, LexFailure):
                yield result
                return
            yield result.token
            if result.token.is_eof:
                return
            cursor = result.cursor

    def tokenize(self, source: str) -> tuple[Token, ...] | LexFailure:
        """Tokenize the whole source eagerly.

        Returns:
            Tokens in order, terminated by exactly one EOF sentinel, or the
            first LexFailure encountered.
        """
        tokens: list[Token] = []
        for item in self.iter_tokens(source):
            if isinstance(item, LexFailure):
                logger.debug("Lexical failure at %s: %s", item.position, item.message)
                return item
            tokens.append(item)
        logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
        return tuple(tokens)
