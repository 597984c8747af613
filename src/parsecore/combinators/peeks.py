"""Peeks and drops.

Non-consuming inspection of upcoming input, and bulk consumption of
everything that is left.
"""

from parsecore.cursor import FAILURE, Cursor, ParseResult, Success

__all__ = ["consume_rest", "drop_rest", "peek", "peek_rest"]


def peek(cursor: Cursor) -> ParseResult[str]:
    """Examine the next character without consuming it.

    Fails if there's no input left.
    """
    if cursor.remaining > 0:
        return Success(cursor.source[cursor.offset], cursor)
    return FAILURE


def peek_rest(cursor: Cursor) -> ParseResult[str]:
    """Examine the rest of the input without consuming it."""
    return Success(cursor.rest, cursor)


def consume_rest(cursor: Cursor) -> ParseResult[str]:
    """Consume and return the rest of the input."""
    return Success(cursor.rest, cursor.exhaust())


def drop_rest(cursor: Cursor) -> ParseResult[None]:
    """Consume and ignore the rest of the input."""
    return Success(None, cursor.exhaust())
