"""Token-level rules.

The leaves of every grammar: rules that look at exactly one token through
``TokenStream.peek`` and either consume it or fail without consuming.
"""

from purelex.syntax.results import ParseFailure, ParseResult
from purelex.syntax.stream import TokenStream
from purelex.syntax.token import EOF, Token

from .combinators import Outcome, Rule
from .context import ParseContext

__all__ = ["end_of_input", "expect", "peek_is", "succeed"]


def expect(*kinds: str) -> Rule[Token]:
    """Rule consuming one token whose kind is among kinds.

    Example:
        >>> rule = expect("NUM")
        >>> result = rule(stream, ParseContext())
        >>> result.value.lexeme
        '1'
    """
    if not kinds:
        msg = "expect() requires at least one token kind"
        raise ValueError(msg)
    if EOF in kinds:
        msg = "Use end_of_input to match the end-of-input sentinel"
        raise ValueError(msg)
    accepted = frozenset(kinds)

    def parse_token(stream: TokenStream, context: ParseContext) -> Outcome[Token]:
        token = stream.peek(0)
        if token.kind in accepted:
            return ParseResult(token, stream.advance())
        return ParseFailure.at(stream, accepted)

    parse_token.__qualname__ = f"expect({', '.join(sorted(accepted))})"
    return parse_token


def end_of_input(stream: TokenStream, context: ParseContext) -> Outcome[None]:
    """Succeed without consuming only when the stream is at its end."""
    if stream.at_end:
        return ParseResult(None, stream)
    return ParseFailure.at(stream, {EOF})


def succeed[T](value: T) -> Rule[T]:
    """Rule that consumes nothing and always returns value."""

    def parse_nothing(stream: TokenStream, context: ParseContext) -> Outcome[T]:
        return ParseResult(value, stream)

    return parse_nothing


def peek_is(stream: TokenStream, *kinds: str) -> bool:
    """One-token lookahead test: is the next token one of kinds?"""
    return stream.peek(0).kind in kinds
