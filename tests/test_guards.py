"""Tests for parsecore.guards."""

from __future__ import annotations

import pytest

from parsecore.cursor import FAILURE, Cursor, Success
from parsecore.diagnostics import NoProgressError
from parsecore.guards import ensure_progress, is_failure, is_success


class TestTypeGuards:
    """is_success / is_failure partition ParseResult."""

    def test_success(self) -> None:
        """Success is a success and not a failure."""
        result = Success("", Cursor.start(""))

        assert is_success(result)
        assert not is_failure(result)

    def test_failure(self) -> None:
        """FAILURE is a failure and not a success."""
        assert is_failure(FAILURE)
        assert not is_success(FAILURE)


class TestEnsureProgress:
    """ensure_progress raises only on zero-width iterations."""

    def test_progress_passes(self) -> None:
        """An advanced cursor is accepted."""
        start = Cursor.start("abc")

        ensure_progress("many", start, start.advance())

    def test_no_progress_raises(self) -> None:
        """The same offset raises NoProgressError naming the combinator."""
        start = Cursor.start("abc")

        with pytest.raises(NoProgressError, match=r"many_till\(\)"):
            ensure_progress("many_till", start, start)
