"""Benchmarks for generator combinators.

Run with: pytest benchmarks/ --benchmark-only -v
"""

from propgen import (
    Lazy,
    frequency,
    frequency_of_values,
    never,
    one_of_values,
    pure,
    recursive,
    sequence_of_values,
)

# =============================================================================
# Primitive benchmarks
# =============================================================================


class TestPrimitives:
    """Benchmark the constant generators."""

    def test_never(self, benchmark):
        benchmark(never().generate)

    def test_pure(self, benchmark):
        benchmark(pure(42).generate)

    def test_pure_map(self, benchmark):
        """Benchmark a mapped pure generator."""
        benchmark(pure(21).map(lambda x: x * 2).generate)


# =============================================================================
# Combinator benchmarks
# =============================================================================


class TestCombinators:
    """Benchmark generate() on the composite generators."""

    def test_one_of_values(self, benchmark):
        benchmark(one_of_values(*range(100)).generate)

    def test_sequence_of_values(self, benchmark):
        benchmark(sequence_of_values(*range(100)).generate)

    def test_frequency_ten_entries(self, benchmark):
        """Benchmark frequency with ten equally weighted entries."""
        gen = frequency(*[(1, pure(i)) for i in range(10)])
        benchmark(gen.generate)

    def test_frequency_of_values_skewed(self, benchmark):
        gen = frequency_of_values((0.01, 'rare'), (0.99, 'common'))
        benchmark(gen.generate)

    def test_recursive_depth_ten(self, benchmark):
        """Benchmark a recursive generator unfolding ten levels deep."""

        def make():
            depth = 0

            def builder(recurse: Lazy) -> object:
                nonlocal depth
                depth += 1
                if depth > 10:
                    return pure(0)
                return recurse.force().map(lambda n: n + 1)

            return recursive(builder).generate()

        benchmark(make)


# =============================================================================
# Lazy benchmarks
# =============================================================================


class TestLazy:
    """Benchmark Lazy evaluation."""

    def test_force_cached(self, benchmark):
        lazy = Lazy(lambda: 42)
        lazy.force()
        benchmark(lazy.force)
