"""parsecore exception hierarchy with structured diagnostics.

Exceptions signal misuse of the combinator API. An ordinary parse failure is
never an exception: combinators return the FAILURE tag and let the nearest
alternation recover from it.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class ParsecoreError(Exception):
    """Base exception for all parsecore errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ParsecoreError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidArgumentError(ParsecoreError, ValueError):
    """A combinator was built with an argument it cannot honour.

    Raised at construction time, never while parsing. Examples:
    - take_exact(-1)
    - replicate(-3, any_char)
    - any_char_but("ab")
    """


class InvalidCursorError(ParsecoreError, ValueError):
    """A Cursor was constructed in violation of its invariants.

    A cursor must satisfy ``0 <= offset``, ``0 <= remaining`` and
    ``offset + remaining == len(source)``.
    """


class NoProgressError(ParsecoreError):
    """A repetition combinator's sub-parser succeeded without consuming input.

    Example:
        many(take_while(str.isdigit))  # take_while can match zero characters

    Repeating such a parser would never terminate, so the loop stops and
    raises instead of hanging.
    """


class NoMatchError(ParsecoreError):
    """The top-level parser did not match the input.

    Raised only by run_or_raise(). Carries no position or cause: hosts
    translate it into their own user-facing diagnostics.
    """
