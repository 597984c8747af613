"""Fuzz testing infrastructure for parsecore.

This package contains:
- test_combinator_property: High-volume algebraic and termination properties
  of the combinators, checked against generated parsers and inputs

Python 3.13+.
"""
