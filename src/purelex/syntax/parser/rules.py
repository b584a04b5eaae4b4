"""Grammar rules for the expression language.

Every rule maps ``(TokenStream, ParseContext)`` to a ParseResult or a
ParseFailure. Most rules are assembled from combinators; ``parse_postfix``
and ``parse_program`` are written out by hand to show the same threading
done explicitly.

Precedence Layers (lowest binds loosest, outermost first):
    expression -> equality -> comparison -> sum -> product -> prefix
    -> postfix -> primary

Lookahead:
    The grammar is LL(1) except for statement selection, which leans on
    ``alternative`` backtracking. ``parse_postfix`` decides between a plain
    reference and a call with a single ``peek_is(stream, LPAREN)``.

Security:
    ``expression``, ``prefix`` and ``block`` are wrapped in ``nested`` so a
    configured max_depth rejects deeply nested input with a failure value.
"""

from collections.abc import Mapping

from purelex.enums import InfixOperator, PrefixOperator
from purelex.syntax.ast import (
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
from purelex.syntax.position import Position
from purelex.syntax.results import ParseFailure, ParseResult, deepest
from purelex.syntax.stream import TokenStream
from purelex.syntax.token import Token

from .combinators import (
    Outcome,
    Rule,
    alternative,
    lazy,
    nested,
    optional,
    repeat,
    separated_by,
    sequence,
    transform,
    with_furthest,
)
from .context import ParseContext
from .lexicon import TokenKind
from .primitives import expect, peek_is

__all__ = [
    "block",
    "expression",
    "parse_expression",
    "parse_postfix",
    "parse_program",
    "primary",
    "statement",
]

_PREFIX_OPERATORS: Mapping[str, PrefixOperator] = {
    TokenKind.MINUS: PrefixOperator.MINUS,
    TokenKind.BANG: PrefixOperator.NOT,
}


# =============================================================================
# Span helpers
# =============================================================================


def _node_span(node: SyntaxNode) -> Span:
    # Every node built by these rules carries a span
    if node.span is None:
        msg = f"{type(node).__name__} built without a span"
        raise ValueError(msg)
    return node.span


def _start(part: Token | SyntaxNode) -> Position:
    if isinstance(part, Token):
        return part.start
    return _node_span(part).start


def _end(part: Token | SyntaxNode) -> Position:
    if isinstance(part, Token):
        return part.end
    return _node_span(part).end


def _span(first: Token | SyntaxNode, last: Token | SyntaxNode) -> Span:
    return Span(_start(first), _end(last))


# =============================================================================
# Primary expressions
# =============================================================================

identifier: Rule[Identifier] = transform(
    expect(TokenKind.IDENT),
    lambda token: Identifier(token.lexeme, _span(token, token)),
)

integer: Rule[IntegerLiteral] = transform(
    expect(TokenKind.NUM),
    lambda token: IntegerLiteral(int(token.lexeme), _span(token, token)),
)

boolean: Rule[BooleanLiteral] = transform(
    expect(TokenKind.TRUE, TokenKind.FALSE),
    lambda token: BooleanLiteral(token.kind == TokenKind.TRUE, _span(token, token)),
)

group: Rule[Group] = sequence(
    expect(TokenKind.LPAREN),
    lazy(lambda: expression),
    expect(TokenKind.RPAREN),
    build=lambda open_, inner, close: Group(inner, _span(open_, close)),
)  # type: ignore[assignment]

block: Rule[Block] = nested(
    sequence(
        expect(TokenKind.LBRACE),
        repeat(lazy(lambda: statement)),
        expect(TokenKind.RBRACE),
        build=lambda open_, body, close: Block(body, _span(open_, close)),
    )
)  # type: ignore[assignment]


def _build_if(
    keyword: Token,
    _open: Token,
    condition: Expression,
    _close: Token,
    consequence: Block,
    alternative_block: Block | None,
) -> IfExpression:
    last = alternative_block if alternative_block is not None else consequence
    return IfExpression(condition, consequence, alternative_block, _span(keyword, last))


if_expression: Rule[IfExpression] = sequence(
    expect(TokenKind.IF),
    expect(TokenKind.LPAREN),
    lazy(lambda: expression),
    expect(TokenKind.RPAREN),
    block,
    optional(sequence(expect(TokenKind.ELSE), block, build=lambda _else, body: body)),
    build=_build_if,
)  # type: ignore[assignment]

function_literal: Rule[FunctionLiteral] = sequence(
    expect(TokenKind.FN),
    expect(TokenKind.LPAREN),
    separated_by(identifier, expect(TokenKind.COMMA)),
    expect(TokenKind.RPAREN),
    block,
    build=lambda keyword, _open, params, _close, body: FunctionLiteral(
        params, body, _span(keyword, body)
    ),
)  # type: ignore[assignment]

primary: Rule[Expression] = alternative(
    integer,
    boolean,
    identifier,
    group,
    if_expression,
    function_literal,
)  # type: ignore[arg-type]

call_arguments: Rule[tuple[tuple[Expression, ...], Token]] = sequence(
    expect(TokenKind.LPAREN),
    separated_by(lazy(lambda: expression), expect(TokenKind.COMMA)),
    expect(TokenKind.RPAREN),
    build=lambda _open, arguments, close: (arguments, close),
)  # type: ignore[assignment]


# =============================================================================
# Postfix, prefix and binary layers
# =============================================================================


def parse_postfix(stream: TokenStream, context: ParseContext) -> Outcome[Expression]:
    """Parse a primary followed by any number of call argument lists.

    Uses one token of lookahead: after the primary, LPAREN means a call and
    anything else ends the rule, so ``a`` stays an Identifier while ``a(b)``
    becomes a Call. The peek consumes nothing.

    Args:
        stream: Current read position
        context: Depth and configuration

    Returns:
        ParseResult with the expression, or the primary's ParseFailure
    """
    outcome = primary(stream, context)
    if isinstance(outcome, ParseFailure):
        return outcome

    node = outcome.value
    furthest = outcome.furthest
    stream = outcome.stream

    while peek_is(stream, TokenKind.LPAREN):
        arguments_outcome = call_arguments(stream, context)
        if isinstance(arguments_outcome, ParseFailure):
            return deepest(furthest, arguments_outcome)  # type: ignore[return-value]
        arguments, close = arguments_outcome.value
        node = Call(node, arguments, _span(node, close))
        furthest = deepest(furthest, arguments_outcome.furthest)
        stream = arguments_outcome.stream

    return with_furthest(ParseResult(node, stream), furthest)


def _build_prefix(operator: Token, operand: Expression) -> PrefixOp:
    return PrefixOp(_PREFIX_OPERATORS[operator.kind], operand, _span(operator, operand))


prefix: Rule[Expression] = nested(
    alternative(
        sequence(
            expect(*_PREFIX_OPERATORS),
            lazy(lambda: prefix),
            build=_build_prefix,
        ),
        parse_postfix,
    )
)  # type: ignore[arg-type]


def _binary_layer(
    operand: Rule[Expression], operators: Mapping[str, InfixOperator]
) -> Rule[Expression]:
    """Left-associative layer: operand (operator operand)*."""

    def build(first: Expression, rest: tuple[tuple[Token, Expression], ...]) -> Expression:
        node = first
        for operator, right in rest:
            node = BinaryOp(operators[operator.kind], node, right, _span(node, right))
        return node

    step = sequence(expect(*operators), operand)
    return sequence(operand, repeat(step), build=build)  # type: ignore[return-value]


product = _binary_layer(
    prefix,
    {TokenKind.STAR: InfixOperator.MULTIPLY, TokenKind.SLASH: InfixOperator.DIVIDE},
)
sum_ = _binary_layer(
    product,
    {TokenKind.PLUS: InfixOperator.PLUS, TokenKind.MINUS: InfixOperator.MINUS},
)
comparison = _binary_layer(
    sum_,
    {TokenKind.LT: InfixOperator.LESS_THAN, TokenKind.GT: InfixOperator.GREATER_THAN},
)
equality = _binary_layer(
    comparison,
    {TokenKind.EQ: InfixOperator.EQUAL, TokenKind.NOT_EQ: InfixOperator.NOT_EQUAL},
)

expression: Rule[Expression] = nested(equality)


# =============================================================================
# Statements
# =============================================================================

_semicolon = optional(expect(TokenKind.SEMICOLON))

let_statement: Rule[LetStatement] = sequence(
    expect(TokenKind.LET),
    identifier,
    expect(TokenKind.ASSIGN),
    expression,
    _semicolon,
    build=lambda keyword, name, _assign, value, semicolon: LetStatement(
        name, value, _span(keyword, semicolon or value)
    ),
)  # type: ignore[assignment]

return_statement: Rule[ReturnStatement] = sequence(
    expect(TokenKind.RETURN),
    expression,
    _semicolon,
    build=lambda keyword, value, semicolon: ReturnStatement(
        value, _span(keyword, semicolon or value)
    ),
)  # type: ignore[assignment]

expression_statement: Rule[ExpressionStatement] = sequence(
    expression,
    _semicolon,
    build=lambda value, semicolon: ExpressionStatement(value, _span(value, semicolon or value)),
)  # type: ignore[assignment]

statement: Rule[Statement] = alternative(
    let_statement,
    return_statement,
    expression_statement,
)  # type: ignore[arg-type]

_statements = repeat(statement)


def parse_program(stream: TokenStream, context: ParseContext) -> Outcome[Program]:
    """Parse statements until none matches.

    Does not require end of input; the Parser entry point appends that check.

    Args:
        stream: Current read position
        context: Depth and configuration

    Returns:
        ParseResult with the Program node
    """
    start = stream.peek(0).start
    outcome = _statements(stream, context)
    if isinstance(outcome, ParseFailure):
        return outcome
    statements = outcome.value
    end = _end(statements[-1]) if statements else start
    program = Program(statements, Span(start, end))
    return ParseResult(program, outcome.stream, outcome.furthest)


def parse_expression(stream: TokenStream, context: ParseContext) -> Outcome[Expression]:
    """Parse a single expression (entry point for expression-only input)."""
    return expression(stream, context)
