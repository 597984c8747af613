"""Functor/monad composition layer.

fmap, pure and bind are the primitives every sequencing combinator in
parsecore derives from. bind short-circuits on failure, so a failed
sub-parser never exposes an intermediate cursor to the caller.
"""

import logging
from collections.abc import Callable

from parsecore.cursor import FAILURE, Cursor, Failure, ParseResult, Parser, Success

__all__ = ["bind", "fmap", "lazy", "pure", "skip_then", "then_skip"]

logger = logging.getLogger(__name__)


def fmap[A, B](f: Callable[[A], B], parser: Parser[A]) -> Parser[B]:
    """Map a function over the result of a parser.

    Failure propagates unchanged; the cursor of a success is kept.
    """

    def parse(cursor: Cursor) -> ParseResult[B]:
        result = parser(cursor)
        if isinstance(result, Failure):
            return FAILURE
        return Success(f(result.value), result.cursor)

    return parse


def pure[T](value: T) -> Parser[T]:
    """Lift a value into a parser that consumes nothing."""

    def parse(cursor: Cursor) -> ParseResult[T]:
        return Success(value, cursor)

    return parse


def bind[A, B](parser: Parser[A], f: Callable[[A], Parser[B]]) -> Parser[B]:
    """Monadic bind; sequence two parsers together.

    Runs parser, then calls f with its value to obtain the next parser and
    runs that from the residual cursor. f is never called if parser fails.
    """

    def parse(cursor: Cursor) -> ParseResult[B]:
        result = parser(cursor)
        if isinstance(result, Failure):
            return FAILURE
        return f(result.value)(result.cursor)

    return parse


def skip_then[A, B](parser1: Parser[A], parser2: Parser[B]) -> Parser[B]:
    """Sequence two parsers, ignoring the result of the first one."""
    return bind(parser1, lambda _: parser2)


def then_skip[A, B](parser1: Parser[A], parser2: Parser[B]) -> Parser[A]:
    """Sequence two parsers, ignoring the result of the second one."""
    return bind(parser1, lambda x: fmap(lambda _: x, parser2))


def lazy[T](factory: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is first applied.

    Lets a grammar refer to a parser that is defined later, which recursive
    grammars need:

        >>> def _nested() -> Parser[int]:
        ...     return alt(fmap(lambda n: n + 1, between(char("("), char(")"), expr)), pure(0))
        >>> expr = lazy(_nested)
        >>> run(expr, "((()))").value
        3

    The factory runs at most once per lazy parser in single-threaded use;
    concurrent first calls may each run it, so it must be pure.
    """
    resolved: list[Parser[T]] = []

    def parse(cursor: Cursor) -> ParseResult[T]:
        if not resolved:
            resolved.append(factory())
            logger.debug("Resolved lazy parser from %r", factory)
        return resolved[0](cursor)

    return parse
