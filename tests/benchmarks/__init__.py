"""Performance benchmarks for parsecore.

Benchmarks use pytest-benchmark to measure and track performance of the
combinator loops. Prevents regressions in take, skip and many throughput.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
