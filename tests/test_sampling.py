"""Tests for the uniform random source."""

import random

from hypothesis import given
from hypothesis import strategies as st
from propgen.sampling import get_sampler, resolve, seeded_sampler, set_sampler, uniform_index

from tests.strategies import draws


class TestProcessWideSampler:
    def test_default_is_random(self):
        assert get_sampler() is random.random

    def test_set_and_clear(self):
        def sampler():
            return 0.5

        set_sampler(sampler)
        assert get_sampler() is sampler
        set_sampler(None)
        assert get_sampler() is random.random

    def test_resolve_prefers_explicit(self):
        def explicit():
            return 0.1

        set_sampler(lambda: 0.9)
        assert resolve(explicit) is explicit
        assert resolve(None)() == 0.9


class TestSeededSampler:
    def test_same_seed_same_draws(self):
        a, b = seeded_sampler(7), seeded_sampler(7)
        assert [a() for _ in range(5)] == [b() for _ in range(5)]

    def test_draws_in_unit_interval(self):
        sampler = seeded_sampler(0)
        assert all(0.0 <= sampler() < 1.0 for _ in range(100))


class TestUniformIndex:
    @given(draws, st.integers(min_value=1, max_value=10_000))
    def test_index_in_range(self, draw, n):
        assert 0 <= uniform_index(lambda: draw, n) < n

    def test_single_candidate(self):
        assert uniform_index(lambda: 0.999, 1) == 0

    def test_buckets(self):
        assert [uniform_index(lambda d=d: d, 4) for d in (0.0, 0.25, 0.5, 0.75)] == [0, 1, 2, 3]
