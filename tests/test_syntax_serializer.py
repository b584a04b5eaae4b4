"""Tests for the syntax tree serializer."""

from __future__ import annotations

import pytest

from purelex.diagnostics import DepthLimitExceededError, DiagnosticCode, PurelexError
from purelex.enums import InfixOperator, PrefixOperator
from purelex.syntax import (
    BinaryOp,
    Block,
    Identifier,
    IntegerLiteral,
    PrefixOp,
    Program,
    Serializer,
    parse,
    serialize,
)
from purelex.syntax.position import Position


class TestSerialize:
    """Test canonical output."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("let x=1", "let x = 1;"),
            ("return x", "return x;"),
            ("1+2*3", "1 + 2 * 3;"),
            ("(1+2)*3", "(1 + 2) * 3;"),
            ("- -x", "--x;"),
            ("!true == false", "!true == false;"),
            ("f(1,g(2),x)", "f(1, g(2), x);"),
            ("if(a<b){a}else{b}", "if (a < b) { a; } else { b; };"),
            ("if(a){}", "if (a) { };"),
            ("fn(a,b){return a+b}", "fn(a, b) { return a + b; };"),
            ("let a = 1; a", "let a = 1;\na;"),
        ],
    )
    def test_canonical_text(self, source: str, expected: str) -> None:
        tree = parse(source)
        assert isinstance(tree, Program)

        assert serialize(tree) == expected

    def test_empty_program(self) -> None:
        assert serialize(Program(())) == ""

    def test_expression_node(self) -> None:
        node = BinaryOp(InfixOperator.MINUS, Identifier("a"), IntegerLiteral(1))

        assert serialize(node) == "a - 1"

    def test_empty_block(self) -> None:
        assert serialize(Block(())) == "{ }"

    def test_serializer_reusable(self) -> None:
        serializer = Serializer()

        assert serializer.serialize(Identifier("a")) == "a"
        assert serializer.serialize(IntegerLiteral(2)) == "2"
        assert serializer.visit(Identifier("b")) == "b"


class TestRoundTrip:
    """parse(serialize(tree)) == tree for parsed trees."""

    @pytest.mark.parametrize(
        "source",
        [
            "let fib = fn(n) { if (n < 2) { return n; } return fib(n - 1) + fib(n - 2); };",
            "f(a)(b)(c)",
            "(f)(1)",
            "-(1 - 2) / !x",
            "a == b != c",
            "if (x) { if (y) { 1 } else { 2 } }",
        ],
    )
    def test_round_trip(self, source: str) -> None:
        tree = parse(source)
        assert isinstance(tree, Program)

        assert parse(serialize(tree)) == tree


class TestLongInput:
    """Trees the parser builds from long or deep input serialize and reparse."""

    def test_long_operator_chain(self) -> None:
        source = " + ".join(["1"] * 150)
        tree = parse(source)
        assert isinstance(tree, Program)

        assert serialize(tree) == f"{source};"
        assert parse(serialize(tree)) == tree

    def test_long_mixed_operator_chain(self) -> None:
        source = " - ".join(["a * 2 < b"] * 200)
        tree = parse(source)
        assert isinstance(tree, Program)

        assert parse(serialize(tree)) == tree

    def test_long_call_chain(self) -> None:
        source = "f" + "(1)" * 500
        tree = parse(source)
        assert isinstance(tree, Program)

        assert serialize(tree) == f"{source};"

    def test_call_chain_inside_operator_chain(self) -> None:
        source = " * ".join(["g(x)(y)"] * 120)
        tree = parse(source)
        assert isinstance(tree, Program)

        assert serialize(tree) == f"{source};"

    def test_prefix_chain_deeper_than_default_guard(self) -> None:
        source = "!" * 150 + "true"
        tree = parse(source)
        assert isinstance(tree, Program)

        assert serialize(tree) == f"{source};"
        assert parse(serialize(tree)) == tree


class TestSerializeErrors:
    """Test rejection of trees the syntax cannot express."""

    def test_unsupported_node(self) -> None:
        with pytest.raises(PurelexError) as exc_info:
            serialize(Position(0))  # type: ignore[arg-type]

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.UNSUPPORTED_NODE
        assert "Position" in str(exc_info.value)

    def test_depth_limit(self) -> None:
        node: PrefixOp | Identifier = Identifier("x")
        for _ in range(2000):
            node = PrefixOp(PrefixOperator.NOT, node)

        with pytest.raises(DepthLimitExceededError):
            serialize(node)

    def test_custom_depth_limit(self) -> None:
        node = PrefixOp(PrefixOperator.NOT, PrefixOp(PrefixOperator.NOT, Identifier("x")))

        with pytest.raises(DepthLimitExceededError):
            Serializer(max_depth=2).serialize(node)
        assert Serializer(max_depth=3).serialize(node) == "!!x"
