"""Skips: bulk consumption that discards what was consumed.

Each skipper mirrors a take in bulk.py but returns None, so no substring
or list is ever built.
"""

from collections.abc import Callable

from parsecore.cursor import FAILURE, Cursor, Failure, ParseResult, Parser, Success
from parsecore.diagnostics import ErrorTemplate, InvalidArgumentError
from parsecore.guards import ensure_progress

__all__ = ["skip", "skip_many", "skip_many1", "skip_while", "skip_while1"]


def skip(n: int) -> Parser[None]:
    """Consume n characters, or fail if there are not enough left.

    Raises:
        InvalidArgumentError: If n is negative
    """
    if n < 0:
        raise InvalidArgumentError(ErrorTemplate.negative_count("skip", n))

    def parse(cursor: Cursor) -> ParseResult[None]:
        if n <= cursor.remaining:
            return Success(None, cursor.advance(n))
        return FAILURE

    return parse


def skip_while(pred: Callable[[str], bool]) -> Parser[None]:
    """Consume characters while the predicate holds. Always succeeds."""

    def parse(cursor: Cursor) -> ParseResult[None]:
        return Success(None, cursor.advance_while(pred))

    return parse


def skip_while1(pred: Callable[[str], bool]) -> Parser[None]:
    """Like skip_while, but fail without consuming if no character matches."""

    def parse(cursor: Cursor) -> ParseResult[None]:
        end = cursor.advance_while(pred)
        if end.offset == cursor.offset:
            return FAILURE
        return Success(None, end)

    return parse


def _skip_rest(combinator: str, parser: Parser[object], cursor: Cursor) -> Cursor:
    while True:
        result = parser(cursor)
        if isinstance(result, Failure):
            return cursor
        ensure_progress(combinator, cursor, result.cursor)
        cursor = result.cursor


def skip_many(parser: Parser[object]) -> Parser[None]:
    """Apply a parser zero or more times, discarding the results.

    Always succeeds.

    Raises:
        NoProgressError: While parsing, if parser succeeds without consuming
            input
    """

    def parse(cursor: Cursor) -> ParseResult[None]:
        return Success(None, _skip_rest("skip_many", parser, cursor))

    return parse


def skip_many1(parser: Parser[object]) -> Parser[None]:
    """Apply a parser one or more times, discarding the results.

    Fails if the first application fails.
    """

    def parse(cursor: Cursor) -> ParseResult[None]:
        first = parser(cursor)
        if isinstance(first, Failure):
            return FAILURE
        ensure_progress("skip_many1", cursor, first.cursor)
        return Success(None, _skip_rest("skip_many1", parser, first.cursor))

    return parse
