"""Pytest configuration and shared fixtures for propgen tests."""

from collections.abc import Callable, Iterator

import pytest


@pytest.fixture(autouse=True)
def reset_global_state() -> Iterator[None]:
    """Restore the default process-wide sampler and configuration."""
    from propgen._config import _reset

    _reset()
    yield
    _reset()


@pytest.fixture
def fixed_sampler() -> Callable[[float], Callable[[], float]]:
    """Factory for samplers that always return the same draw."""

    def make(value: float) -> Callable[[], float]:
        return lambda: value

    return make


@pytest.fixture
def counting_producer():
    """A zero-argument producer that records how often it was called."""

    class Producer:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self) -> int:
            self.calls += 1
            return self.calls

    return Producer()
