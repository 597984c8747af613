"""Shared constants for parsecore.

This module provides the character classes used by the predicate-driven
combinators. Placing them here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- ASCII character classes: Ready-made sets for satisfy/one_of/take_while
- Whitespace classes: Inline and general whitespace

All classes are ASCII only. ``str.isdigit()`` returns True for Unicode
digits such as superscript two, which ``int()`` cannot convert; grammars that
feed matched text to ``int()`` should use ASCII_DIGITS.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # ASCII character classes
    "ASCII_DIGITS",
    "ASCII_HEX_DIGITS",
    "ASCII_LOWERCASE",
    "ASCII_UPPERCASE",
    "ASCII_LETTERS",
    "ASCII_ALNUM",
    # Whitespace classes
    "INLINE_WHITESPACE",
    "LINE_ENDINGS",
    "WHITESPACE",
]

# ============================================================================
# ASCII CHARACTER CLASSES
# ============================================================================

ASCII_DIGITS: frozenset[str] = frozenset("0123456789")

ASCII_HEX_DIGITS: frozenset[str] = ASCII_DIGITS | frozenset("abcdefABCDEF")

ASCII_LOWERCASE: frozenset[str] = frozenset("abcdefghijklmnopqrstuvwxyz")

ASCII_UPPERCASE: frozenset[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

ASCII_LETTERS: frozenset[str] = ASCII_LOWERCASE | ASCII_UPPERCASE

ASCII_ALNUM: frozenset[str] = ASCII_LETTERS | ASCII_DIGITS

# ============================================================================
# WHITESPACE CLASSES
# ============================================================================

# Space and tab only; never crosses a line boundary.
INLINE_WHITESPACE: frozenset[str] = frozenset(" \t")

LINE_ENDINGS: frozenset[str] = frozenset("\n\r")

WHITESPACE: frozenset[str] = INLINE_WHITESPACE | LINE_ENDINGS | frozenset("\f\v")
