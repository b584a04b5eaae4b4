"""Serialize syntax trees back to source text.

Converts nodes to canonical source. Useful for:
- Formatters
- Code generators
- Property-based testing (roundtrip: parse -> serialize -> parse)

Binary operations are written without added parentheses: a tree produced
by the parser already records explicit grouping as Group nodes, so the
text reparses to an equal tree.

Left-associative operator chains and call chains are built iteratively by
the parser and can be arbitrarily long, so they are unwound with a loop
here rather than by recursion.

Python 3.13+.
"""

from purelex.diagnostics import ErrorTemplate, PurelexError

from .ast import (
    BinaryOp,
    Block,
    BooleanLiteral,
    Call,
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
    SyntaxNode,
)
from .visitor import ASTVisitor

__all__ = ["Serializer", "serialize"]


class Serializer(ASTVisitor[str]):
    """Converts a syntax tree to source text.

    No mutable state besides the depth guard, which is balanced on every
    return, so one instance can serialize any number of trees.

    Usage:
        >>> from purelex.syntax import parse, Serializer
        >>> tree = parse("let x = 1 + 2")
        >>> Serializer().serialize(tree)
        'let x = 1 + 2;'
    """

    def serialize(self, node: SyntaxNode) -> str:
        """Serialize any node (Program, statement or expression).

        Raises:
            PurelexError: If the tree contains a node type that has no syntax
            DepthLimitExceededError: If the tree is nested deeper than max_depth
        """
        output: list[str] = []
        self._serialize_node(node, output)
        return "".join(output)

    def generic_visit(self, node: SyntaxNode) -> str:
        return self.serialize(node)

    def _serialize_node(self, node: SyntaxNode, output: list[str]) -> None:
        with self._depth_guard:
            match node:
                case Program(statements=statements):
                    output.append("\n".join(self.serialize(item) for item in statements))
                case Block():
                    self._serialize_block(node, output)
                case LetStatement(name=name, value=value):
                    output.append(f"let {name.name} = ")
                    self._serialize_node(value, output)
                    output.append(";")
                case ReturnStatement(value=value):
                    output.append("return ")
                    self._serialize_node(value, output)
                    output.append(";")
                case ExpressionStatement(expression=expression):
                    self._serialize_node(expression, output)
                    output.append(";")
                case _:
                    self._serialize_expression(node, output)

    def _serialize_block(self, node: Block, output: list[str]) -> None:
        if not node.statements:
            output.append("{ }")
            return
        output.append("{ ")
        output.append(" ".join(self.serialize(item) for item in node.statements))
        output.append(" }")

    def _serialize_expression(self, expr: SyntaxNode, output: list[str]) -> None:
        """Serialize expression nodes using structural pattern matching."""
        match expr:
            case Identifier(name=name):
                output.append(name)

            case IntegerLiteral(value=value):
                output.append(str(value))

            case BooleanLiteral(value=value):
                output.append("true" if value else "false")

            case PrefixOp(operator=operator, operand=operand):
                output.append(operator.value)
                self._serialize_node(operand, output)

            case Group(expression=inner):
                output.append("(")
                self._serialize_node(inner, output)
                output.append(")")

            case BinaryOp() | Call():
                self._serialize_chain(expr, output)

            case IfExpression(condition=condition, consequence=consequence):
                output.append("if (")
                self._serialize_node(condition, output)
                output.append(") ")
                self._serialize_block(consequence, output)
                if expr.alternative is not None:
                    output.append(" else ")
                    self._serialize_block(expr.alternative, output)

            case FunctionLiteral(parameters=parameters, body=body):
                output.append("fn(")
                output.append(", ".join(item.name for item in parameters))
                output.append(") ")
                self._serialize_block(body, output)

            case _:
                raise PurelexError(ErrorTemplate.unsupported_node(type(expr).__name__))

    def _serialize_chain(self, expr: BinaryOp | Call, output: list[str]) -> None:
        """Serialize a left spine of BinaryOp and Call nodes without recursing on it."""
        spine: list[BinaryOp | Call] = []
        node: SyntaxNode = expr
        while isinstance(node, BinaryOp | Call):
            spine.append(node)
            node = node.left if isinstance(node, BinaryOp) else node.callee
        self._serialize_node(node, output)

        for link in reversed(spine):
            if isinstance(link, BinaryOp):
                output.append(f" {link.operator.value} ")
                self._serialize_node(link.right, output)
            else:
                output.append("(")
                output.append(", ".join(self.serialize(item) for item in link.arguments))
                output.append(")")


def serialize(node: SyntaxNode) -> str:
    """Serialize a tree to source text.

    Convenience function for Serializer.serialize().

    Example:
        >>> from purelex.syntax import parse, serialize
        >>> serialize(parse("fn(a,b){a+b}"))
        'fn(a, b) { a + b; };'
    """
    return Serializer().serialize(node)
