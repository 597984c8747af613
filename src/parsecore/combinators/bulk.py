"""Takes: bulk consumption returning what was consumed.

Fixed-count and predicate-driven takes, plus the parser-driven loops many,
many1 and many_till.

Termination:
    Predicate-driven takes always make progress or stop. The parser-driven
    loops run ensure_progress() after every successful iteration and raise
    NoProgressError when the sub-parser succeeded without consuming input,
    instead of looping forever.
"""

from collections.abc import Callable

from parsecore.cursor import FAILURE, Cursor, Failure, ParseResult, Parser, Success
from parsecore.diagnostics import ErrorTemplate, InvalidArgumentError
from parsecore.guards import ensure_progress

__all__ = [
    "many",
    "many1",
    "many_till",
    "take_exact",
    "take_while",
    "take_while1",
]


def take_exact(n: int) -> Parser[str]:
    """Consume n characters, or fail if there are not enough left.

    Returns the characters consumed.

    Raises:
        InvalidArgumentError: If n is negative
    """
    if n < 0:
        raise InvalidArgumentError(ErrorTemplate.negative_count("take_exact", n))

    def parse(cursor: Cursor) -> ParseResult[str]:
        if n <= cursor.remaining:
            return Success(cursor.slice_ahead(n), cursor.advance(n))
        return FAILURE

    return parse


def take_while(pred: Callable[[str], bool]) -> Parser[str]:
    """Consume characters while the predicate holds, returning them.

    Always succeeds; matching zero characters yields "".

    Example:
        >>> result = run(take_while(str.isdigit), "123abc")
        >>> result.value, result.cursor.rest
        ('123', 'abc')
    """

    def parse(cursor: Cursor) -> ParseResult[str]:
        end = cursor.advance_while(pred)
        return Success(cursor.slice_to(end.offset), end)

    return parse


def take_while1(pred: Callable[[str], bool]) -> Parser[str]:
    """Like take_while, but fail without consuming if no character matches."""

    def parse(cursor: Cursor) -> ParseResult[str]:
        end = cursor.advance_while(pred)
        if end.offset == cursor.offset:
            return FAILURE
        return Success(cursor.slice_to(end.offset), end)

    return parse


def _collect[T](
    combinator: str, parser: Parser[T], cursor: Cursor, values: list[T]
) -> Cursor:
    """Apply parser until it fails, appending values; return the final cursor."""
    while True:
        result = parser(cursor)
        if isinstance(result, Failure):
            return cursor
        ensure_progress(combinator, cursor, result.cursor)
        values.append(result.value)
        cursor = result.cursor


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Apply a parser zero or more times until it fails.

    Always succeeds, possibly with an empty list.

    Raises:
        NoProgressError: While parsing, if parser succeeds without consuming
            input
    """

    def parse(cursor: Cursor) -> ParseResult[list[T]]:
        values: list[T] = []
        end = _collect("many", parser, cursor, values)
        return Success(values, end)

    return parse


def many1[T](parser: Parser[T]) -> Parser[list[T]]:
    """Apply a parser one or more times until it fails.

    Fails if the first application fails; otherwise the result equals what
    many(parser) would have produced.
    """

    def parse(cursor: Cursor) -> ParseResult[list[T]]:
        first = parser(cursor)
        if isinstance(first, Failure):
            return FAILURE
        ensure_progress("many1", cursor, first.cursor)
        values = [first.value]
        end = _collect("many1", parser, first.cursor, values)
        return Success(values, end)

    return parse


def many_till[T](parser: Parser[T], terminator: Parser[object]) -> Parser[list[T]]:
    """Apply parser repeatedly until terminator succeeds.

    terminator is tried first at every step, so ``many_till(p, end)`` on
    input starting with end yields an empty list. The input matched by
    terminator IS consumed: the residual cursor is positioned after it. Its
    value is discarded.

    Fails, as a whole, if parser fails before terminator matches (including
    running out of input).

    Example:
        >>> comment = skip_then(literal("<!--"), many_till(any_char, literal("-->")))
        >>> "".join(run(comment, "<!-- hi -->rest").value)
        ' hi '

    Raises:
        NoProgressError: While parsing, if parser succeeds without consuming
            input
    """

    def parse(cursor: Cursor) -> ParseResult[list[T]]:
        values: list[T] = []
        while True:
            end = terminator(cursor)
            if not isinstance(end, Failure):
                return Success(values, end.cursor)
            result = parser(cursor)
            if isinstance(result, Failure):
                return FAILURE
            ensure_progress("many_till", cursor, result.cursor)
            values.append(result.value)
            cursor = result.cursor

    return parse
