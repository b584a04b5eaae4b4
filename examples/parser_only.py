"""Parser Example - From Source Text to Syntax Tree.

Demonstrates the state-threading pipeline end to end:

1. Parse a program and inspect the tree
2. Report failures returned as values
3. Step the tokenizer and token stream by hand
4. Write a grammar of your own from combinators
5. Serialize a tree back to source

Python 3.13+.
"""

from __future__ import annotations


def example_1_basic_parsing() -> None:
    """Parse a program and inspect its statements."""
    from purelex import parse
    from purelex.syntax import LetStatement, Program, ReturnStatement

    print("=" * 60)
    print("Example 1: Basic Parsing")
    print("=" * 60)

    source = """
let add = fn(a, b) { a + b };
let total = add(1, 2 * 3);
return total;
"""

    program = parse(source)
    assert isinstance(program, Program)

    print(f"Parsed {len(program.statements)} statements:")
    for statement in program.statements:
        match statement:
            case LetStatement(name=name, span=span):
                print(f"  let {name.name} at {span.start if span else '?'}")
            case ReturnStatement():
                print("  return")
            case _:
                print(f"  {type(statement).__name__}")

    print()


def example_2_failures() -> None:
    """Failures are values carrying position, expected and found."""
    from purelex import Parser, PurelexSyntaxError, parse
    from purelex.syntax import LEXICON, ParseFailure
    from purelex.syntax.parser import parse_program

    print("=" * 60)
    print("Example 2: Failure Values")
    print("=" * 60)

    failure = parse("let x = (1 + 2;")
    if isinstance(failure, ParseFailure):
        print(f"  {failure.format_error()}")
        print(f"  expected={sorted(failure.expected)} found={failure.found}")

    parser = Parser(LEXICON, parse_program)
    try:
        parser.parse_or_raise("let = 1")
    except PurelexSyntaxError as error:
        print(str(error))

    print()


def example_3_manual_threading() -> None:
    """Drive the tokenizer and stream by hand; nothing is mutated."""
    from purelex.syntax import LEXICON, Cursor, LexResult, Tokenizer, TokenStream

    print("=" * 60)
    print("Example 3: Threading Cursors and Streams")
    print("=" * 60)

    tokenizer = Tokenizer(LEXICON)
    cursor = Cursor.start("f(x) // call")
    while True:
        result = tokenizer.tokenize_next(cursor)
        assert isinstance(result, LexResult)
        print(f"  {result.token} at {result.token.start}")
        if result.token.is_eof:
            break
        cursor = result.cursor

    tokens = tokenizer.tokenize("a b c")
    assert isinstance(tokens, tuple)
    stream = TokenStream.from_tokens(tokens, lookahead_depth=2)
    later = stream.advance()
    print(f"  original peek: {stream.peek()}, advanced peek: {later.peek()}")
    print(f"  two ahead from advanced: {later.peek(1)}")

    print()


def example_4_custom_grammar() -> None:
    """Build a key=value list grammar from combinators."""
    from purelex import Parser
    from purelex.syntax import Lexicon, TokenPattern
    from purelex.syntax.parser import expect, separated_by, sequence

    print("=" * 60)
    print("Example 4: Custom Grammar")
    print("=" * 60)

    lexicon = Lexicon.of(
        [
            TokenPattern("KEY", r"[a-z]+"),
            TokenPattern("VALUE", r"[0-9]+"),
            TokenPattern("EQUALS", "=", literal=True),
            TokenPattern("COMMA", ",", literal=True),
            TokenPattern("SPACE", r"\s+", trivia=True),
        ]
    )
    pair = sequence(
        expect("KEY"),
        expect("EQUALS"),
        expect("VALUE"),
        build=lambda key, _eq, value: (key.lexeme, int(value.lexeme)),
    )
    parser = Parser(lexicon, separated_by(pair, expect("COMMA")))

    print(f"  {dict(parser.parse_or_raise('width = 80, height = 24'))}")
    failure = parser.parse("width = 80, height")
    print(f"  {failure.format_error()}")  # type: ignore[union-attr]

    print()


def example_5_serialize() -> None:
    """Render a tree back to canonical source."""
    from purelex import parse, serialize

    print("=" * 60)
    print("Example 5: Serialization Roundtrip")
    print("=" * 60)

    tree = parse("let  x=if(a<b){a}else{b}")
    text = serialize(tree)  # type: ignore[arg-type]
    print(f"  {text}")
    print(f"  roundtrip equal: {parse(text) == tree}")

    print()


if __name__ == "__main__":
    example_1_basic_parsing()
    example_2_failures()
    example_3_manual_threading()
    example_4_custom_grammar()
    example_5_serialize()
