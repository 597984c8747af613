"""Performance benchmarks for the combinator loops.

Measures throughput of the predicate-driven takes, the parser-driven many
loops and a small recursive grammar to detect regressions.

Python 3.13+.
"""

from __future__ import annotations

from parsecore import (
    Parser,
    Success,
    alt,
    any_char,
    between,
    bind,
    char,
    fmap,
    lazy,
    literal,
    many,
    many_till,
    replicate,
    run,
    skip_many,
    take_while,
    take_while1,
)


class TestTakeBenchmarks:
    """Benchmark predicate-driven consumption."""

    def test_take_while_long_run(self, benchmark) -> None:
        """Benchmark take_while over 10k matching characters."""
        source = "7" * 10_000
        parser = take_while(str.isdigit)

        result = benchmark(run, parser, source)

        assert isinstance(result, Success)
        assert len(result.value) == 10_000


class TestRepetitionBenchmarks:
    """Benchmark the many loops."""

    def test_many_any_char(self, benchmark) -> None:
        """Benchmark many(any_char) over 5k characters."""
        source = "x" * 5_000

        result = benchmark(run, many(any_char), source)

        assert isinstance(result, Success)
        assert len(result.value) == 5_000

    def test_skip_many_literal(self, benchmark) -> None:
        """Benchmark skip_many(literal) over 2k repetitions."""
        source = "ab" * 2_000

        result = benchmark(run, skip_many(literal("ab")), source)

        assert isinstance(result, Success)
        assert result.cursor.is_eof

    def test_many_till_comment(self, benchmark) -> None:
        """Benchmark many_till scanning for a terminator."""
        source = "<!--" + "c" * 2_000 + "-->"
        parser = bind(literal("<!--"), lambda _: many_till(any_char, literal("-->")))

        result = benchmark(run, parser, source)

        assert isinstance(result, Success)
        assert len(result.value) == 2_000

    def test_replicate(self, benchmark) -> None:
        """Benchmark replicate(n, p) for a large n."""
        source = "a" * 5_000

        result = benchmark(run, replicate(5_000, char("a")), source)

        assert isinstance(result, Success)


nested: Parser[int] = lazy(
    lambda: alt(
        fmap(lambda inner: inner + 1, between(char("["), char("]"), nested)),
        fmap(len, take_while1(str.isdigit)),
    )
)


class TestGrammarBenchmarks:
    """Benchmark a recursive grammar."""

    def test_nested_brackets(self, benchmark) -> None:
        """Benchmark 50 levels of nested brackets."""
        depth = 50
        source = "[" * depth + "0" + "]" * depth

        result = benchmark(run, nested, source)

        assert isinstance(result, Success)
        assert result.value == depth + 1
