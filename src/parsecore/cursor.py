"""Immutable cursor and result model for combinator parsing.

Implements the immutable cursor pattern: a parser is a pure function from a
Cursor to a ParseResult, and backtracking is simply reusing an earlier
cursor value.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - Cursor is a (source, offset, remaining) triple; the source string is
      shared by reference and never copied per step
    - Failure is a distinct tag, never a None/empty value
    - Every advance() returns NEW cursor (old cursors stay valid for backtracking)

Pattern Reference:
    - Haskell Parsec / attoparsec
    - Rust nom parser combinator library
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Literal

from parsecore.diagnostics import ErrorTemplate, InvalidArgumentError, InvalidCursorError

__all__ = ["FAILURE", "Cursor", "Failure", "ParseResult", "Parser", "Success"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per parse step)
        3. Remaining length stored alongside offset - EOF checks are O(1)
           integer comparisons
        4. current raises - No None handling needed!

    Invariant:
        0 <= offset, 0 <= remaining, offset + remaining == len(source)

    Example:
        >>> cursor = Cursor.start("hello")
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> new_cursor.remaining
        4
    """

    source: str
    offset: int
    remaining: int

    def __post_init__(self) -> None:
        """Validate the position invariant.

        Raises:
            InvalidCursorError: If offset or remaining is negative, or they
                do not add up to the source length
        """
        if self.offset < 0:
            raise InvalidCursorError(ErrorTemplate.cursor_negative_offset(self.offset))
        if self.remaining < 0:
            raise InvalidCursorError(
                ErrorTemplate.cursor_negative_remaining(self.remaining)
            )
        if self.offset + self.remaining != len(self.source):
            raise InvalidCursorError(
                ErrorTemplate.cursor_length_mismatch(
                    self.offset, self.remaining, len(self.source)
                )
            )

    @classmethod
    def start(cls, source: str) -> "Cursor":
        """Create the initial cursor for a parse of source.

        Example:
            >>> Cursor.start("abc")
            Cursor(source='abc', offset=0, remaining=3)
        """
        return cls(source, 0, len(source))

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if no input remains
        """
        return self.remaining == 0

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at offset

        Raises:
            EOFError: If at end of input
        """
        if self.remaining == 0:
            msg = f"Unexpected EOF at offset {self.offset}"
            raise EOFError(msg)
        return self.source[self.offset]

    @property
    def rest(self) -> str:
        """Remaining input from the current offset to the end."""
        return self.source[self.offset :]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1). Clamped to
                the remaining length.

        Returns:
            New Cursor instance at new position (original unchanged)

        Raises:
            InvalidArgumentError: If count is negative

        Example:
            >>> cursor = Cursor.start("hello")
            >>> cursor.advance(2).offset
            2
            >>> cursor.offset  # Original unchanged
            0
        """
        if count < 0:
            raise InvalidArgumentError(ErrorTemplate.negative_count("advance", count))
        step = min(count, self.remaining)
        return Cursor(self.source, self.offset + step, self.remaining - step)

    def advance_while(self, pred: Callable[[str], bool]) -> "Cursor":
        """Return new cursor advanced past every leading character satisfying pred.

        Stops at the first character that violates pred, or at EOF. The
        source is scanned in place; nothing is copied.

        Example:
            >>> cursor = Cursor.start("123abc")
            >>> cursor.advance_while(str.isdigit).offset
            3
            >>> cursor.advance_while(str.isspace) == cursor  # No match, no move
            True
        """
        source = self.source
        end = len(source)
        ix = self.offset
        while ix < end and pred(source[ix]):
            ix += 1
        return Cursor(source, ix, end - ix)

    def exhaust(self) -> "Cursor":
        """Return new cursor positioned at end of input."""
        return Cursor(self.source, len(self.source), 0)

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Returns:
            String of up to n characters starting at current offset.
            May return fewer characters if near EOF.

        Example:
            >>> cursor = Cursor.start("hello")
            >>> cursor.slice_ahead(3)
            'hel'
            >>> cursor.slice_ahead(10)  # More than available
            'hello'
        """
        return self.source[self.offset : self.offset + n]

    def slice_to(self, end_offset: int) -> str:
        """Extract source slice from current offset to end_offset (exclusive)."""
        return self.source[self.offset : end_offset]

    def consumed_since(self, earlier: "Cursor") -> int:
        """Number of characters consumed between earlier and this cursor.

        Example:
            >>> start = Cursor.start("hello")
            >>> start.advance(3).consumed_since(start)
            3
        """
        return self.offset - earlier.offset


@dataclass(frozen=True, slots=True)
class Success[T]:
    """Parser success carrying the parsed value and the residual cursor.

    Type Parameters:
        T: The type of the parsed value

    Design:
        - Frozen for immutability
        - Truthy regardless of value, so ``Success("")`` and
          ``Success(None)`` are never mistaken for failure

    Example:
        >>> cursor = Cursor.start("hello")
        >>> result = Success("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.offset
        1
    """

    value: T
    cursor: Cursor

    def __bool__(self) -> Literal[True]:
        return True


@dataclass(frozen=True, slots=True)
class Failure:
    """Parser failure: no match at the current cursor.

    Carries no position and no cause. Use the FAILURE singleton rather than
    constructing new instances.
    """

    def __bool__(self) -> Literal[False]:
        return False

    def __repr__(self) -> str:
        return "FAILURE"


FAILURE: Final[Failure] = Failure()

type ParseResult[T] = Success[T] | Failure

type Parser[T] = Callable[[Cursor], ParseResult[T]]
