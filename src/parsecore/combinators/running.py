"""Running parsers and querying parser state.

Entry points that turn a string into a parse result, plus the zero-width
introspection parsers current_state and tally.
"""

import logging

from parsecore.cursor import FAILURE, Cursor, ParseResult, Parser, Success
from parsecore.diagnostics import ErrorTemplate, NoMatchError
from parsecore.guards import is_failure

__all__ = ["current_state", "is_failure", "run", "run_or_raise", "tally"]

logger = logging.getLogger(__name__)


def run[T](parser: Parser[T], text: str) -> ParseResult[T]:
    """Run a parser over text from the beginning.

    Does NOT require the parser to consume all of its input. Sequence the
    parser with ``eof`` to enforce complete consumption.

    Args:
        parser: Parser to apply
        text: Input text

    Returns:
        Success holding the produced value and the residual cursor, or
        FAILURE if the parser did not match

    Example:
        >>> run(literal("ab"), "abc").value
        'ab'
        >>> run(literal("ab"), "a")
        FAILURE
    """
    result = parser(Cursor.start(text))
    if is_failure(result):
        logger.debug("Parse failed on input of length %d", len(text))
    return result


def run_or_raise[T](parser: Parser[T], text: str) -> T:
    """Run a parser and return the bare value.

    Args:
        parser: Parser to apply
        text: Input text

    Returns:
        The value produced by the parser

    Raises:
        NoMatchError: If the parser did not match
    """
    result = run(parser, text)
    if is_failure(result):
        raise NoMatchError(ErrorTemplate.no_match(len(text)))
    return result.value


def current_state(cursor: Cursor) -> ParseResult[Cursor]:
    """Zero-width parser returning the current cursor as its value."""
    return Success(cursor, cursor)


def tally[T](parser: Parser[T]) -> Parser[tuple[int, T]]:
    """Augment a parser to also return the number of characters it consumed.

    Example:
        >>> run(tally(take_while(str.isdigit)), "123abc").value
        (3, '123')
    """

    def parse(cursor: Cursor) -> ParseResult[tuple[int, T]]:
        result = parser(cursor)
        if is_failure(result):
            return FAILURE
        return Success((result.cursor.consumed_since(cursor), result.value), result.cursor)

    return parse
