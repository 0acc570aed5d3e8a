"""Uniform random source shared by the randomised combinators.

A sampler is any zero-argument callable returning a float in [0.0, 1.0).
Combinators accept one explicitly; otherwise they read the process-wide
sampler at generate() time, so `set_sampler()` (or `propgen.init(seed=...)`)
also affects generators built earlier.
"""

from __future__ import annotations

import random
from collections.abc import Callable

__all__ = [
    'Sampler',
    'get_sampler',
    'resolve',
    'seeded_sampler',
    'set_sampler',
    'uniform_index',
]

type Sampler = Callable[[], float]

# Process-wide sampler (set by set_sampler() / init())
_sampler: Sampler | None = None


def set_sampler(sampler: Sampler | None) -> None:
    """Install the process-wide sampler; None restores `random.random`."""
    global _sampler  # noqa: PLW0603
    _sampler = sampler


def get_sampler() -> Sampler:
    """Return the process-wide sampler."""
    if _sampler is None:
        return random.random
    return _sampler


def seeded_sampler(seed: int) -> Sampler:
    """Return a deterministic sampler backed by a private `random.Random`.

    Example:
        ```python
        a, b = seeded_sampler(7), seeded_sampler(7)
        assert [a() for _ in range(3)] == [b() for _ in range(3)]
        ```
    """
    return random.Random(seed).random


def uniform_index(sampler: Sampler, n: int) -> int:
    """Draw an index in [0, n) for n > 0."""
    # r * n can round up to n for r close to 1.0
    return min(int(sampler() * n), n - 1)


def resolve(sampler: Sampler | None) -> Sampler:
    """Return `sampler`, or the process-wide one when it is None."""
    return sampler if sampler is not None else get_sampler()
