"""Parser core: combinators, token-level rules and the example grammar.

Module Organization:
- context.py: ParseContext threaded alongside the token stream
- combinators.py: sequence, alternative, repeat, optional and friends
- primitives.py: Token-level rules (expect, end_of_input, succeed)
- lexicon.py: Token kinds and pattern table of the expression language
- rules.py: Grammar rules of the expression language
- core.py: Parser class and parse() entry point

Public API:
    Parser: Entry point driving tokenizer, stream and entry rule
    ParseContext: Depth and configuration passed to every rule
"""

from purelex.syntax.parser.combinators import (
    Outcome,
    Rule,
    alternative,
    label,
    lazy,
    nested,
    optional,
    repeat,
    separated_by,
    sequence,
    transform,
    with_furthest,
)
from purelex.syntax.parser.context import ParseContext
from purelex.syntax.parser.core import Parser
from purelex.syntax.parser.lexicon import LEXICON, TokenKind
from purelex.syntax.parser.primitives import end_of_input, expect, peek_is, succeed
from purelex.syntax.parser.rules import parse_expression, parse_program

__all__ = [
    "LEXICON",
    "Outcome",
    "ParseContext",
    "Parser",
    "Rule",
    "TokenKind",
    "alternative",
    "end_of_input",
    "expect",
    "label",
    "lazy",
    "nested",
    "optional",
    "parse_expression",
    "parse_program",
    "peek_is",
    "repeat",
    "separated_by",
    "sequence",
    "succeed",
    "transform",
    "with_furthest",
]
