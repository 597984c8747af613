"""Consumption primitives.

Single-character and literal matches, negative lookahead and end-of-input.

Atomicity:
    Every primitive either succeeds and advances the cursor, or fails and
    leaves it exactly as received. literal() in particular never consumes a
    partial prefix on mismatch.

A "character" is one Python code point; multi-code-point graphemes are not
treated as a unit.
"""

from collections.abc import Callable, Iterable

from parsecore.cursor import FAILURE, Cursor, Failure, ParseResult, Parser, Success
from parsecore.diagnostics import ErrorTemplate, InvalidArgumentError

__all__ = [
    "any_char",
    "any_char_but",
    "char",
    "eof",
    "literal",
    "none_of",
    "not_followed_by",
    "one_of",
    "satisfy",
    "satisfy_with",
]


def _require_single_character(combinator: str, value: str) -> None:
    if len(value) != 1:
        raise InvalidArgumentError(
            ErrorTemplate.not_a_single_character(combinator, value)
        )


def satisfy(pred: Callable[[str], bool]) -> Parser[str]:
    """Consume a character if it satisfies a predicate.

    Example:
        >>> run(satisfy(str.isupper), "Ab").value
        'A'
    """

    def parse(cursor: Cursor) -> ParseResult[str]:
        if cursor.remaining > 0:
            c = cursor.source[cursor.offset]
            if pred(c):
                return Success(c, cursor.advance())
        return FAILURE

    return parse


def satisfy_with[T](f: Callable[[str], T], pred: Callable[[str], bool]) -> Parser[T]:
    """Consume a character if it satisfies a predicate, applying f to it.

    Example:
        >>> run(satisfy_with(int, str.isdigit), "7").value
        7
    """

    def parse(cursor: Cursor) -> ParseResult[T]:
        if cursor.remaining > 0:
            c = cursor.source[cursor.offset]
            if pred(c):
                return Success(f(c), cursor.advance())
        return FAILURE

    return parse


any_char: Parser[str] = satisfy(lambda _: True)


def any_char_but(c: str) -> Parser[str]:
    """Consume any character except c.

    Raises:
        InvalidArgumentError: If c is not a single character
    """
    _require_single_character("any_char_but", c)
    return satisfy(lambda x: x != c)


def char(c: str) -> Parser[str]:
    """Consume exactly the character c.

    Raises:
        InvalidArgumentError: If c is not a single character
    """
    _require_single_character("char", c)
    return satisfy(lambda x: x == c)


def one_of(chars: Iterable[str]) -> Parser[str]:
    """Consume a character that is a member of chars."""
    members = frozenset(chars)
    return satisfy(lambda x: x in members)


def none_of(chars: Iterable[str]) -> Parser[str]:
    """Consume a character that is not a member of chars."""
    members = frozenset(chars)
    return satisfy(lambda x: x not in members)


def literal(s: str) -> Parser[str]:
    """Consume the string s and return it.

    If the remaining input does not start with s, fail WITHOUT consuming
    any input.

    Example:
        >>> run(literal("ab"), "abc").cursor.rest
        'c'
    """
    length = len(s)

    def parse(cursor: Cursor) -> ParseResult[str]:
        if cursor.remaining >= length and cursor.source.startswith(s, cursor.offset):
            return Success(s, cursor.advance(length))
        return FAILURE

    return parse


def not_followed_by(parser: Parser[object]) -> Parser[None]:
    """Succeed only when parser fails; never consume any input.

    Example:
        >>> keyword = then_skip(literal("let"), not_followed_by(satisfy(str.isalnum)))
        >>> run(keyword, "letter")
        FAILURE
    """

    def parse(cursor: Cursor) -> ParseResult[None]:
        if isinstance(parser(cursor), Failure):
            return Success(None, cursor)
        return FAILURE

    return parse


def eof(cursor: Cursor) -> ParseResult[None]:
    """Fail if there is still more input remaining, return None otherwise."""
    if cursor.remaining == 0:
        return Success(None, cursor)
    return FAILURE
