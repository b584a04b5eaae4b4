"""Parser combinators threading the token stream explicitly.

Every rule has the signature::

    rule(stream: TokenStream, context: ParseContext) -> ParseResult[T] | ParseFailure

Combinators build rules from rules. Because streams are immutable, trying
an alternative from "the same original stream" is just calling the next
rule with the value already in hand: the failed attempt never touched it.
There is no rollback step anywhere in this module.

Failure Tracking:
    ParseResult.furthest carries the deepest failure of any abandoned
    attempt that got past the point where the success ended. When a later
    rule fails, the deeper of the two is reported, which points the user
    at the furthest position the parser reached.
"""

import logging
from collections.abc import Callable

from purelex.enums import FailureReport, TieBreak
from purelex.syntax.results import ParseFailure, ParseResult, deepest
from purelex.syntax.stream import TokenStream

from .context import ParseContext

__all__ = [
    "Outcome",
    "Rule",
    "alternative",
    "label",
    "lazy",
    "nested",
    "optional",
    "repeat",
    "separated_by",
    "sequence",
    "transform",
    "with_furthest",
]

logger = logging.getLogger(__name__)

type Outcome[T] = ParseResult[T] | ParseFailure
type Rule[T] = Callable[[TokenStream, ParseContext], Outcome[T]]


def with_furthest[T](result: ParseResult[T], failure: ParseFailure | None) -> ParseResult[T]:
    """Attach failure to result if it got strictly past result.stream."""
    furthest = deepest(result.furthest, failure)
    if furthest is not None and furthest.index <= result.stream.position:
        furthest = None
    if furthest is result.furthest:
        return result
    return ParseResult(result.value, result.stream, furthest)


def sequence(*rules: Rule[object], build: Callable[..., object] | None = None) -> Rule[object]:
    """Apply rules one after another, feeding each the previous stream.

    Args:
        rules: Rules to apply in order
        build: Called with one positional argument per rule result; the
            default builds a tuple

    Returns:
        Rule yielding ``build(*values)``. The first failure is propagated
        as-is; the partially advanced stream is simply dropped.
    """
    if not rules:
        msg = "sequence() requires at least one rule"
        raise ValueError(msg)

    def parse_sequence(stream: TokenStream, context: ParseContext) -> Outcome[object]:
        values: list[object] = []
        furthest: ParseFailure | None = None
        current = stream
        for rule in rules:
            outcome = rule(current, context)
            if isinstance(outcome, ParseFailure):
                return deepest(furthest, outcome)  # type: ignore[return-value]
            values.append(outcome.value)
            furthest = deepest(furthest, outcome.furthest)
            current = outcome.stream
        value = build(*values) if build is not None else tuple(values)
        return with_furthest(ParseResult(value, current), furthest)

    return parse_sequence


def alternative[T](*rules: Rule[T], tie_break: TieBreak | None = None) -> Rule[T]:
    """Ordered choice with backtracking.

    Each branch receives the same original stream. With FIRST_MATCH the
    first success wins; with LONGEST_PARSE every branch runs and the success
    that consumed most tokens wins (earlier branch on ties). When all
    branches fail, the failure reported follows ``config.failure_report``.
    A fatal failure is returned immediately.

    Args:
        rules: Branches in priority order
        tie_break: Overrides ``config.tie_break`` for this choice
    """
    if not rules:
        msg = "alternative() requires at least one rule"
        raise ValueError(msg)

    def parse_alternative(stream: TokenStream, context: ParseContext) -> Outcome[T]:
        mode = tie_break if tie_break is not None else context.config.tie_break
        report_first = context.config.failure_report is FailureReport.FIRST
        failure: ParseFailure | None = None
        best: ParseResult[T] | None = None
        for rule in rules:
            outcome = rule(stream, context)
            if isinstance(outcome, ParseFailure):
                if outcome.fatal:
                    return outcome
                if failure is None:
                    failure = outcome
                elif not report_first:
                    failure = failure.merge(outcome)
                continue
            if mode is TieBreak.FIRST_MATCH:
                return with_furthest(outcome, failure)
            if best is None or outcome.stream.position > best.stream.position:
                if best is not None:
                    failure = deepest(failure, best.furthest)
                best = outcome
            else:
                failure = deepest(failure, outcome.furthest)
        if best is not None:
            return with_furthest(best, failure)
        return failure  # type: ignore[return-value]  # rules is non-empty

    return parse_alternative


def repeat[T](rule: Rule[T], min_count: int = 0, max_count: int | None = None) -> Rule[tuple[T, ...]]:
    """Apply rule as many times as it succeeds.

    Stops at the first failure (its stream is discarded), after max_count
    repetitions, or after a repetition that consumed nothing. Succeeds if
    at least min_count repetitions matched.

    Returns:
        Rule yielding a tuple of results
    """
    if min_count < 0:
        msg = f"min_count must be >= 0, got {min_count}"
        raise ValueError(msg)
    if max_count is not None and max_count < min_count:
        msg = f"max_count ({max_count}) must be >= min_count ({min_count})"
        raise ValueError(msg)

    def parse_repeat(stream: TokenStream, context: ParseContext) -> Outcome[tuple[T, ...]]:
        values: list[T] = []
        furthest: ParseFailure | None = None
        current = stream
        while max_count is None or len(values) < max_count:
            outcome = rule(current, context)
            if isinstance(outcome, ParseFailure):
                if outcome.fatal or len(values) < min_count:
                    return deepest(furthest, outcome)  # type: ignore[return-value]
                furthest = deepest(furthest, outcome)
                break
            values.append(outcome.value)
            furthest = deepest(furthest, outcome.furthest)
            if outcome.stream.position == current.position:
                break
            current = outcome.stream
        return with_furthest(ParseResult(tuple(values), current), furthest)

    return parse_repeat


def optional[T](rule: Rule[T]) -> Rule[T | None]:
    """Rule result, or None without consuming when rule fails."""
    from .primitives import succeed  # noqa: PLC0415 - circular

    return alternative(rule, succeed(None), tie_break=TieBreak.FIRST_MATCH)


def transform[T, U](rule: Rule[T], function: Callable[[T], U]) -> Rule[U]:
    """Map function over the value of a successful rule."""

    def parse_transform(stream: TokenStream, context: ParseContext) -> Outcome[U]:
        outcome = rule(stream, context)
        if isinstance(outcome, ParseFailure):
            return outcome
        return ParseResult(function(outcome.value), outcome.stream, outcome.furthest)

    return parse_transform


def label[T](rule: Rule[T], *names: str) -> Rule[T]:
    """Replace the expected set of a failure that consumed nothing.

    Turns "expected NUM, IDENT, LPAREN or MINUS" into "expected expression"
    when the rule fails right at its starting token.
    """
    expected = frozenset(names)

    def parse_labelled(stream: TokenStream, context: ParseContext) -> Outcome[T]:
        outcome = rule(stream, context)
        if (
            isinstance(outcome, ParseFailure)
            and not outcome.fatal
            and outcome.index == stream.position
        ):
            return ParseFailure(
                outcome.position, expected, outcome.found, outcome.index, outcome.code
            )
        return outcome

    return parse_labelled


def lazy[T](factory: Callable[[], Rule[T]]) -> Rule[T]:
    """Defer rule lookup to call time, for recursive grammars.

    Example:
        >>> group = sequence(expect("LPAREN"), lazy(lambda: expression), expect("RPAREN"))
    """

    def parse_lazy(stream: TokenStream, context: ParseContext) -> Outcome[T]:
        return factory()(stream, context)

    return parse_lazy


def nested[T](rule: Rule[T]) -> Rule[T]:
    """Run rule one nesting level deeper, enforcing config.max_depth.

    Returns a fatal MAX_DEPTH_EXCEEDED failure instead of recursing when
    the limit is reached. The call stack can run out before a configured
    limit does (or with no limit at all); the innermost nested rule then
    turns the RecursionError into the same fatal failure at its own
    position. If building that failure overflows again, the next enclosing
    nested rule catches it with more stack to spare.
    """

    def parse_nested(stream: TokenStream, context: ParseContext) -> Outcome[T]:
        if context.is_depth_exceeded():
            logger.debug(
                "Nesting depth %d reached at token %d", context.depth, stream.position
            )
            return ParseFailure.depth_exceeded(stream, context.depth)
        try:
            return rule(stream, context.enter())
        except RecursionError:
            return ParseFailure.depth_exceeded(stream, context.depth)

    return parse_nested


def separated_by[T](
    item: Rule[T], separator: Rule[object], *, allow_empty: bool = True
) -> Rule[tuple[T, ...]]:
    """Zero or more items separated by separator (no trailing separator).

    Args:
        item: Rule for each element
        separator: Rule consumed between elements; its value is dropped
        allow_empty: Accept zero items (default) or require at least one
    """
    tail = repeat(sequence(separator, item, build=lambda _sep, value: value))
    chain = sequence(item, tail, build=lambda first, rest: (first, *rest))
    if not allow_empty:
        return chain  # type: ignore[return-value]
    return transform(optional(chain), lambda values: () if values is None else values)  # type: ignore[arg-type, return-value]
