"""Result and failure values returned by the tokenizer and the parser core.

Failures are values, not exceptions: every combinator inspects what a rule
returned and decides whether to propagate it, try another branch, or stop
a repetition. None of these objects is mutable, so a failure can be kept,
compared and reported after the attempt that produced it is discarded.
"""

from dataclasses import dataclass, replace

from purelex.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate
from purelex.enums import FailureKind

from .cursor import Cursor
from .position import Position
from .stream import TokenStream
from .token import Token

__all__ = [
    "Failure",
    "LexFailure",
    "LexResult",
    "ParseFailure",
    "ParseResult",
    "deepest",
]


@dataclass(frozen=True, slots=True)
class LexResult:
    """Token produced by the tokenizer plus the cursor after it."""

    token: Token
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class LexFailure:
    """No token pattern matches the input at ``position``.

    Attributes:
        position: Where the tokenizer stopped
        unexpected: The character no pattern could start with
    """

    position: Position
    unexpected: str

    @property
    def kind(self) -> FailureKind:
        return FailureKind.LEX

    @property
    def code(self) -> DiagnosticCode:
        return DiagnosticCode.UNEXPECTED_CHARACTER

    @property
    def expected(self) -> frozenset[str]:
        """Lexical failures carry no expected token kinds."""
        return frozenset()

    @property
    def found(self) -> str:
        return self.unexpected

    @property
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unexpected_character(self.position, self.unexpected)

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def format_error(self) -> str:
        """Format as "line:column: message"."""
        return f"{self.position}: {self.message}"


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Token stream does not match the rule being attempted.

    Attributes:
        position: Start of the offending token (end of input for EOF)
        expected: Token kinds that would have been accepted
        found: Kind of the offending token
        index: Token index in the stream, the "consumed position"
        code: Diagnostic code
        fatal: Stops alternatives and repetitions from trying further
        max_depth: Limit that tripped, for MAX_DEPTH_EXCEEDED

    Example:
        >>> failure = ParseFailure.at(stream, {"RPAREN"})
        >>> failure.format_error()
        '1:5: Unexpected end of input, expected RPAREN'
    """

    position: Position
    expected: frozenset[str]
    found: str
    index: int
    code: DiagnosticCode = DiagnosticCode.UNEXPECTED_TOKEN
    fatal: bool = False
    max_depth: int | None = None

    @classmethod
    def at(cls, stream: TokenStream, expected: frozenset[str] | set[str]) -> "ParseFailure":
        """Failure at the stream's read position."""
        token = stream.peek(0)
        code = DiagnosticCode.UNEXPECTED_EOF if token.is_eof else DiagnosticCode.UNEXPECTED_TOKEN
        return cls(token.start, frozenset(expected), token.kind, stream.position, code)

    @classmethod
    def depth_exceeded(cls, stream: TokenStream, max_depth: int) -> "ParseFailure":
        """Fatal failure raised by the nesting guard."""
        token = stream.peek(0)
        return cls(
            token.start,
            frozenset(),
            token.kind,
            stream.position,
            DiagnosticCode.MAX_DEPTH_EXCEEDED,
            fatal=True,
            max_depth=max_depth,
        )

    @property
    def kind(self) -> FailureKind:
        return FailureKind.PARSE

    @property
    def diagnostic(self) -> Diagnostic:
        match self.code:
            case DiagnosticCode.MAX_DEPTH_EXCEEDED:
                return ErrorTemplate.max_depth_exceeded(self.position, self.max_depth or 0)
            case DiagnosticCode.UNEXPECTED_EOF:
                return ErrorTemplate.unexpected_eof(self.position, self.expected)
            case _:
                return ErrorTemplate.unexpected_token(self.position, self.expected, self.found)

    @property
    def message(self) -> str:
        return self.diagnostic.message

    def format_error(self) -> str:
        """Format as "line:column: message"."""
        return f"{self.position}: {self.message}"

    def merge(self, other: "ParseFailure") -> "ParseFailure":
        """Combine two failures from attempts starting at the same place.

        A fatal failure always wins. Otherwise the failure that got further
        wins; at the same index the expected sets are united.
        """
        if self.fatal:
            return self
        if other.fatal:
            return other
        if other.index > self.index:
            return other
        if other.index < self.index or other.expected <= self.expected:
            return self
        return replace(self, expected=self.expected | other.expected)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Successful rule application.

    Attributes:
        value: What the rule built (node, token, tuple of results, ...)
        stream: Stream positioned after the consumed tokens
        furthest: Deepest failure of an abandoned attempt that got past
            ``stream.position``; kept only for diagnostics
    """

    value: T
    stream: TokenStream
    furthest: ParseFailure | None = None


type Failure = LexFailure | ParseFailure


def deepest(first: ParseFailure | None, second: ParseFailure | None) -> ParseFailure | None:
    """Merge two optional failures (see ParseFailure.merge)."""
    if first is None:
        return second
    if second is None:
        return first
    return first.merge(second)
