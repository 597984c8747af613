"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable and documents all error cases in one place.
    """

    @staticmethod
    def negative_count(combinator: str, count: int) -> Diagnostic:
        """Repetition or take count below zero.

        Args:
            combinator: Name of the combinator being built
            count: The rejected count

        Returns:
            Diagnostic for NEGATIVE_COUNT
        """
        msg = f"{combinator}() count must be non-negative, got {count}"
        return Diagnostic(
            code=DiagnosticCode.NEGATIVE_COUNT,
            message=msg,
            hint="Pass a count of zero or more",
        )

    @staticmethod
    def not_a_single_character(combinator: str, value: str) -> Diagnostic:
        """Character argument is not exactly one code point.

        Args:
            combinator: Name of the combinator being built
            value: The rejected argument

        Returns:
            Diagnostic for NOT_A_SINGLE_CHARACTER
        """
        msg = f"{combinator}() expects a single character, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_SINGLE_CHARACTER,
            message=msg,
            hint="Use literal() to match strings longer than one character",
        )

    @staticmethod
    def cursor_negative_offset(offset: int) -> Diagnostic:
        """Cursor offset below zero.

        Args:
            offset: The rejected offset

        Returns:
            Diagnostic for CURSOR_NEGATIVE_OFFSET
        """
        msg = f"Cursor offset must be non-negative, got {offset}"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_NEGATIVE_OFFSET,
            message=msg,
            hint="Create cursors with Cursor.start(text)",
        )

    @staticmethod
    def cursor_negative_remaining(remaining: int) -> Diagnostic:
        """Cursor remaining length below zero.

        Args:
            remaining: The rejected remaining length

        Returns:
            Diagnostic for CURSOR_NEGATIVE_REMAINING
        """
        msg = f"Cursor remaining length must be non-negative, got {remaining}"
        return Diagnostic(
            code=DiagnosticCode.CURSOR_NEGATIVE_REMAINING,
            message=msg,
            hint="Create cursors with Cursor.start(text)",
        )

    @staticmethod
    def cursor_length_mismatch(offset: int, remaining: int, length: int) -> Diagnostic:
        """Cursor offset and remaining length do not cover the source.

        Args:
            offset: Cursor offset
            remaining: Cursor remaining length
            length: Length of the source text

        Returns:
            Diagnostic for CURSOR_LENGTH_MISMATCH
        """
        msg = (
            f"Cursor offset ({offset}) + remaining ({remaining}) "
            f"must equal source length ({length})"
        )
        return Diagnostic(
            code=DiagnosticCode.CURSOR_LENGTH_MISMATCH,
            message=msg,
            hint="Advance cursors with Cursor.advance() instead of building them by hand",
        )

    @staticmethod
    def zero_progress_repetition(combinator: str, offset: int) -> Diagnostic:
        """Repeated parser succeeded without consuming input.

        Args:
            combinator: Name of the repetition combinator
            offset: Offset at which the zero-width success happened

        Returns:
            Diagnostic for ZERO_PROGRESS_REPETITION
        """
        msg = (
            f"{combinator}() sub-parser succeeded without consuming input "
            f"at offset {offset}; repetition would never terminate"
        )
        return Diagnostic(
            code=DiagnosticCode.ZERO_PROGRESS_REPETITION,
            message=msg,
            hint="Repeat a parser that consumes at least one character, "
            "e.g. take_while1 instead of take_while",
        )

    @staticmethod
    def no_match(length: int) -> Diagnostic:
        """Top-level parser did not match.

        Args:
            length: Length of the input text

        Returns:
            Diagnostic for NO_MATCH
        """
        msg = f"Parser did not match input of length {length}"
        return Diagnostic(
            code=DiagnosticCode.NO_MATCH,
            message=msg,
        )
