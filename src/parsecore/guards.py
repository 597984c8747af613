"""Type guards and runtime guards for parse results.

Type guards narrow ParseResult to Success or Failure for mypy
(Python 3.13+ with TypeIs support, PEP 742):

    >>> result = run(literal("ab"), "abc")
    >>> if is_success(result):
    ...     # mypy knows result is Success[str]
    ...     print(result.value.upper())
    AB

The progress guard stops repetition combinators from looping forever on a
sub-parser that succeeds without consuming input.
"""

import logging
from typing import TypeIs

from parsecore.cursor import Cursor, Failure, ParseResult, Success
from parsecore.diagnostics import ErrorTemplate, NoProgressError

__all__ = ["ensure_progress", "is_failure", "is_success"]

logger = logging.getLogger(__name__)


def is_failure(result: ParseResult[object]) -> TypeIs[Failure]:
    """Type guard: Did a parser fail?"""
    return isinstance(result, Failure)


def is_success[T](result: ParseResult[T]) -> TypeIs[Success[T]]:
    """Type guard: Did a parser succeed? A success may still hold None or ""."""
    return isinstance(result, Success)


def ensure_progress(combinator: str, before: Cursor, after: Cursor) -> None:
    """Raise if one iteration of a repetition consumed nothing.

    Args:
        combinator: Name of the repetition combinator, for the diagnostic
        before: Cursor the iteration started from
        after: Cursor the iteration's successful sub-parser returned

    Raises:
        NoProgressError: If after has not advanced past before
    """
    if after.offset <= before.offset:
        logger.warning(
            "%s() sub-parser made no progress at offset %d; aborting repetition",
            combinator,
            before.offset,
        )
        raise NoProgressError(
            ErrorTemplate.zero_progress_repetition(combinator, before.offset)
        )
