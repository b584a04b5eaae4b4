"""Syntax tree node definitions for the expression language.

Nodes are frozen dataclasses. Children are owned sub-nodes (tuples for
sequences), there are no parent back-references, and each node carries the
source Span it was built from. Spans are excluded from equality so trees
can be compared structurally, e.g. ``BinaryOp("+", IntegerLiteral(1), ...)``.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass, field

from purelex.enums import InfixOperator, PrefixOperator

from .position import Position

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Statements
    "Program",
    "LetStatement",
    "ReturnStatement",
    "ExpressionStatement",
    "Block",
    # Expressions
    "Identifier",
    "IntegerLiteral",
    "BooleanLiteral",
    "PrefixOp",
    "BinaryOp",
    "Call",
    "Group",
    "IfExpression",
    "FunctionLiteral",
    # Type aliases
    "Statement",
    "Expression",
    "SyntaxNode",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source range covered by a node.

    Attributes:
        start: Position of the first character (inclusive)
        end: Position after the last character (exclusive)
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.end.offset < self.start.offset:
            msg = f"Span end ({self.end.offset}) must be >= start ({self.start.offset})"
            raise ValueError(msg)

    def slice(self, source: str) -> str:
        """Text of source covered by this span."""
        return source[self.start.offset : self.end.offset]


# ============================================================================
# EXPRESSIONS
# ============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Variable reference: [A-Za-z_][A-Za-z0-9_]*"""

    name: str
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class IntegerLiteral:
    """Decimal integer literal."""

    value: int
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class BooleanLiteral:
    """``true`` or ``false``."""

    value: bool
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class PrefixOp:
    """Unary operator applied to an operand: ``-x``, ``!ok``."""

    operator: PrefixOperator
    operand: "Expression"
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class BinaryOp:
    """Left-associative binary operation.

    Example:
        ``1 + 2 * 3`` parses to
        BinaryOp("+", IntegerLiteral(1), BinaryOp("*", IntegerLiteral(2), IntegerLiteral(3)))
    """

    operator: InfixOperator
    left: "Expression"
    right: "Expression"
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Call:
    """Call expression: ``callee(arg, ...)``."""

    callee: "Expression"
    arguments: tuple["Expression", ...] = ()
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Group:
    """Parenthesized expression, kept so source structure survives a round trip."""

    expression: "Expression"
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class IfExpression:
    """``if (condition) { ... } else { ... }``; alternative is optional."""

    condition: "Expression"
    consequence: "Block"
    alternative: "Block | None" = None
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class FunctionLiteral:
    """``fn(a, b) { ... }``"""

    parameters: tuple[Identifier, ...]
    body: "Block"
    span: Span | None = field(default=None, compare=False)


# ============================================================================
# STATEMENTS
# ============================================================================


@dataclass(frozen=True, slots=True)
class LetStatement:
    """``let name = value;``"""

    name: Identifier
    value: "Expression"
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class ReturnStatement:
    """``return value;``"""

    value: "Expression"
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    """Expression used as a statement."""

    expression: "Expression"
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Block:
    """Braced statement list."""

    statements: tuple["Statement", ...] = ()
    span: Span | None = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class Program:
    """Root node containing all top-level statements."""

    statements: tuple["Statement", ...] = ()
    span: Span | None = field(default=None, compare=False)


# ============================================================================
# TYPE ALIASES
# ============================================================================

type Expression = (
    Identifier
    | IntegerLiteral
    | BooleanLiteral
    | PrefixOp
    | BinaryOp
    | Call
    | Group
    | IfExpression
    | FunctionLiteral
)

type Statement = LetStatement | ReturnStatement | ExpressionStatement

type SyntaxNode = Program | Block | Statement | Expression
