"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for combinator misuse.
Parse failures never produce a Diagnostic: a no-match is the bare
FAILURE tag. Diagnostics only describe programming errors (bad
arguments, broken cursor invariants, zero-progress repetition).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Argument errors (invalid combinator construction)
        2000-2999: Cursor errors (broken position invariants)
        3000-3999: Repetition errors (zero-progress loops)
        4000-4999: Run errors (top-level no-match)
    """

    # Argument errors (1000-1999)
    NEGATIVE_COUNT = 1001
    NOT_A_SINGLE_CHARACTER = 1002

    # Cursor errors (2000-2999)
    CURSOR_NEGATIVE_OFFSET = 2001
    CURSOR_NEGATIVE_REMAINING = 2002
    CURSOR_LENGTH_MISMATCH = 2003

    # Repetition errors (3000-3999)
    ZERO_PROGRESS_REPETITION = 3001

    # Run errors (4000-4999)
    NO_MATCH = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[NEGATIVE_COUNT]: Count must be non-negative, got -1
              = help: Pass a count of zero or more characters

        Returns:
            Formatted error string
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
