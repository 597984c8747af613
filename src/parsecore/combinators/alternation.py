"""Options and failure.

Alternation is deterministic and first-match: alt never compares the
lengths of competing successes. Backtracking needs no bookkeeping because
each alternative is applied to the same immutable cursor.
"""

from collections.abc import Iterable
from typing import Never

from parsecore.combinators.composition import pure
from parsecore.cursor import FAILURE, Cursor, Failure, ParseResult, Parser, Success

__all__ = ["alt", "choice", "never", "option", "optional"]


def never(cursor: Cursor) -> ParseResult[Never]:  # noqa: ARG001
    """Parser that always fails (the identity under alt)."""
    return FAILURE


def alt[T](parser1: Parser[T], parser2: Parser[T]) -> Parser[T]:
    """Run parser1; if it fails, run parser2 from the same cursor."""

    def parse(cursor: Cursor) -> ParseResult[T]:
        result = parser1(cursor)
        if isinstance(result, Failure):
            return parser2(cursor)
        return result

    return parse


def option[T](default: T, parser: Parser[T]) -> Parser[T]:
    """Try parser, or return default without consuming input if it fails."""
    return alt(parser, pure(default))


def optional[T](parser: Parser[T]) -> Parser[list[T]]:
    """Try parser; return its value in a singleton list, or an empty list.

    Unlike option(), no default value is fabricated: an empty list always
    means parser did not match. Every call builds a fresh list.
    """

    def parse(cursor: Cursor) -> ParseResult[list[T]]:
        result = parser(cursor)
        if isinstance(result, Failure):
            return Success([], cursor)
        return Success([result.value], result.cursor)

    return parse


def choice[T](parsers: Iterable[Parser[T]]) -> Parser[T]:
    """Run a sequence of parsers, using the first one that succeeds.

    Equivalent to folding alt over parsers with never as the identity. The
    iterable is consumed once, when the combinator is built.
    """
    candidates = tuple(parsers)

    def parse(cursor: Cursor) -> ParseResult[T]:
        for candidate in candidates:
            result = candidate(cursor)
            if not isinstance(result, Failure):
                return result
        return FAILURE

    return parse
