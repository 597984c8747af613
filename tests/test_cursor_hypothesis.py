"""Hypothesis property-based tests for Cursor.

Tests the position invariant and immutability under navigation.
Complements test_cursor.py with property-based testing.
"""

from __future__ import annotations

from hypothesis import assume, event, given, settings
from hypothesis import strategies as st

from parsecore.cursor import Cursor
from tests.strategies import unicode_text

steps = st.integers(min_value=0, max_value=60)


class TestCursorInvariantProperties:
    """offset + remaining == len(source) survives every transition."""

    @given(source=unicode_text, count=steps)
    @settings(max_examples=200)
    def test_advance_preserves_invariant(self, source: str, count: int) -> None:
        """PROPERTY: advance(n) keeps offset + remaining == len(source)."""
        moved = Cursor.start(source).advance(count)
        event(f"clamped={count > len(source)}")

        assert moved.offset + moved.remaining == len(source)
        assert moved.offset == min(count, len(source))

    @given(source=unicode_text)
    @settings(max_examples=100)
    def test_exhaust_preserves_invariant(self, source: str) -> None:
        """PROPERTY: exhaust() lands at offset len(source) with nothing left."""
        cursor = Cursor.start(source).exhaust()

        assert cursor.offset == len(source)
        assert cursor.is_eof

    @given(source=unicode_text)
    @settings(max_examples=100)
    def test_stepping_visits_every_character(self, source: str) -> None:
        """PROPERTY: advancing one at a time reads the source back in order."""
        cursor = Cursor.start(source)
        seen = []
        while not cursor.is_eof:
            seen.append(cursor.current)
            cursor = cursor.advance()

        assert "".join(seen) == source


class TestCursorImmutabilityProperties:
    """Navigation never mutates an existing cursor."""

    @given(source=unicode_text, count=steps)
    @settings(max_examples=200)
    def test_original_unchanged_after_advance(self, source: str, count: int) -> None:
        """PROPERTY: advance() returns a new cursor; the old one still reads the same."""
        assume(len(source) > 0)
        cursor = Cursor.start(source)
        _ = cursor.advance(count)

        assert cursor.offset == 0
        assert cursor.rest == source

    @given(source=unicode_text)
    @settings(max_examples=100)
    def test_advance_while_matches_manual_scan(self, source: str) -> None:
        """PROPERTY: advance_while(pred) stops where a manual scan stops."""
        cursor = Cursor.start(source)
        expected = 0
        while expected < len(source) and source[expected].isalpha():
            expected += 1

        assert cursor.advance_while(str.isalpha).offset == expected
