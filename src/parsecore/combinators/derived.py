"""Combinators derived from the composition and alternation layers."""

from parsecore.combinators.composition import skip_then, then_skip
from parsecore.cursor import FAILURE, Cursor, Failure, ParseResult, Parser, Success
from parsecore.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = ["between", "replicate"]


def between[T](before: Parser[object], after: Parser[object], middle: Parser[T]) -> Parser[T]:
    """Sequence before, middle and after, keeping only the middle result.

    Example:
        >>> parens = lambda p: between(literal("("), literal(")"), p)
        >>> run(parens(take_while(str.isdigit)), "(42)").value
        '42'
    """
    return skip_then(before, then_skip(middle, after))


def replicate[T](n: int, parser: Parser[T]) -> Parser[list[T]]:
    """Repeat a parser n times, returning the results from each parse.

    Equivalent to n nested binds collecting into a list, but runs as a loop
    so large n does not deepen the call stack. Fails as a whole if any
    application fails; no partial list is ever returned.

    Raises:
        InvalidArgumentError: If n is negative
    """
    if n < 0:
        raise InvalidArgumentError(ErrorTemplate.negative_count("replicate", n))

    def parse(cursor: Cursor) -> ParseResult[list[T]]:
        values: list[T] = []
        for _ in range(n):
            result = parser(cursor)
            if isinstance(result, Failure):
                return FAILURE
            values.append(result.value)
            cursor = result.cursor
        return Success(values, cursor)

    return parse
