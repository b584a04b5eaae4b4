"""Lexing and parsing package.

Provides the cursor and tokenizer, the token stream, the parser core with
its combinators, syntax tree definitions, the visitor and the serializer.

Python 3.13+.
"""

from purelex.config import ParserConfig

from .ast import (
    BinaryOp,
    Block,
    BooleanLiteral,
    Call,
    Expression,
    ExpressionStatement,
    FunctionLiteral,
    Group,
    Identifier,
    IfExpression,
    IntegerLiteral,
    LetStatement,
    PrefixOp,
    Program,
    ReturnStatement,
    Span,
    Statement,
    SyntaxNode,
)
from .cursor import Cursor, peek_char
from .parser import LEXICON, Parser, TokenKind, parse_expression, parse_program
from .position import Position, format_position, position_at
from .results import Failure, LexFailure, LexResult, ParseFailure, ParseResult
from .serializer import Serializer, serialize
from .stream import TokenStream
from .token import EOF, Token, TokenPattern
from .tokenizer import Lexicon, Tokenizer
from .visitor import ASTVisitor

__all__ = [
    "EOF",
    "LEXICON",
    "ASTVisitor",
    "BinaryOp",
    "Block",
    "BooleanLiteral",
    "Call",
    "Cursor",
    "Expression",
    "ExpressionStatement",
    "Failure",
    "FunctionLiteral",
    "Group",
    "Identifier",
    "IfExpression",
    "IntegerLiteral",
    "LetStatement",
    "LexFailure",
    "LexResult",
    "Lexicon",
    "ParseFailure",
    "ParseResult",
    "Parser",
    "Position",
    "PrefixOp",
    "Program",
    "ReturnStatement",
    "Serializer",
    "Span",
    "Statement",
    "SyntaxNode",
    "Token",
    "TokenKind",
    "TokenPattern",
    "TokenStream",
    "Tokenizer",
    "format_position",
    "parse",
    "parse_source_expression",
    "peek_char",
    "position_at",
    "serialize",
]


def parse(source: str, *, config: ParserConfig | None = None) -> Program | Failure:
    """Parse a program of the expression language.

    Convenience function for ``Parser(LEXICON, parse_program).parse()``.

    Args:
        source: Program text
        config: Parser options (default: ``ParserConfig()``)

    Returns:
        Program node, or the LexFailure/ParseFailure describing the error

    Example:
        >>> from purelex.syntax import parse
        >>> program = parse("let x = 1;")
        >>> program.statements[0].name.name
        'x'
    """
    return Parser(LEXICON, parse_program, config=config).parse(source)


def parse_source_expression(
    source: str, *, config: ParserConfig | None = None
) -> Expression | Failure:
    """Parse source that must be exactly one expression (no statements)."""
    return Parser(LEXICON, parse_expression, config=config).parse(source)
