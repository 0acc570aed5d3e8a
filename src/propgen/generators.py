"""Generator combinators: uniform choice, cyclic sequencing, weighted frequency and recursion.

Every constructor is total: empty inputs and weightings with no positive
weight degrade to `never()` instead of raising.

Example:
    ```python
    import random

    from propgen import frequency, one_of_values, pure, recursive

    digits = one_of_values(*range(10))
    coin = frequency((0.9, pure('heads')), (0.1, pure('tails')))

    def nested(recurse):
        if random.random() < 0.75:
            return pure('')
        return recurse.force().map(lambda s: f'({s})')

    parens = recursive(nested)
    ```
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from propgen._logging import get_logger, is_configured
from propgen.generator import Generator
from propgen.lazy import Lazy
from propgen.maybe import Maybe, Nothing, NothingType, Some
from propgen.sampling import Sampler, resolve, uniform_index

__all__ = [
    'choose',
    'frequency',
    'frequency_of_values',
    'never',
    'one_of',
    'one_of_values',
    'pure',
    'recursive',
    'sequence_of',
    'sequence_of_values',
]

logger = get_logger(__name__)


class _Never(Generator[Any]):
    __slots__ = ()

    def generate(self) -> NothingType:
        return Nothing

    def __repr__(self) -> str:
        return 'never()'


class _Pure[T](Generator[T]):
    __slots__ = ('_value',)

    def __init__(self, value: T) -> None:
        self._value = value

    def generate(self) -> Some[T]:
        return Some(self._value)

    def __repr__(self) -> str:
        return f'pure({self._value!r})'


class _OneOf[T](Generator[T]):
    __slots__ = ('_generators', '_sampler')

    def __init__(self, generators: tuple[Generator[T], ...], sampler: Sampler | None) -> None:
        self._generators = generators
        self._sampler = sampler

    def generate(self) -> Maybe[T]:
        index = uniform_index(resolve(self._sampler), len(self._generators))
        return self._generators[index].generate()


class _SequenceOf[T](Generator[T]):
    """Cycles through its generators in order, one per call.

    The cursor is private mutable state advanced by every generate() call,
    whether or not the delegate produced a value. Not safe for concurrent
    generate() calls: callers sharing an instance across threads must
    serialize access themselves.
    """

    __slots__ = ('_cursor', '_generators')

    def __init__(self, generators: tuple[Generator[T], ...]) -> None:
        self._generators = generators
        self._cursor = 0

    def generate(self) -> Maybe[T]:
        drawn = self._generators[self._cursor].generate()
        self._cursor = (self._cursor + 1) % len(self._generators)
        return drawn


class _Frequency[T](Generator[T]):
    """Weighted choice over generators with clamped, positive total weight."""

    __slots__ = ('_entries', '_fallback', '_sampler', '_total')

    def __init__(
        self,
        entries: list[tuple[float, Generator[T]]],
        total: float,
        sampler: Sampler | None,
    ) -> None:
        self._entries = entries
        self._total = total
        self._sampler = sampler
        self._fallback = next(gen for weight, gen in reversed(entries) if weight > 0)

    def generate(self) -> Maybe[T]:
        target = resolve(self._sampler)() * self._total
        running = 0.0
        for weight, gen in self._entries:
            running += weight
            if running > target:
                return gen.generate()
        # target landed on total through rounding
        _debug('frequency_fallback', target=target, total=self._total)
        return self._fallback.generate()


class _Recursive[T](Generator[T]):
    """Unfolds `builder` once per generate() call.

    The continuation handed to `builder` is a fresh Lazy on every unfolding;
    forcing it calls `builder` again. Depth is bounded only by `builder`.
    """

    __slots__ = ('_builder',)

    def __init__(self, builder: Callable[[Lazy[Generator[T]]], Generator[T]]) -> None:
        self._builder = builder

    def _unfold(self) -> Generator[T]:
        return self._builder(Lazy(self._unfold))

    def generate(self) -> Maybe[T]:
        return self._unfold().generate()


class _Choose(Generator[float]):
    __slots__ = ('_high', '_integral', '_low', '_sampler')

    def __init__(self, low: float, high: float, sampler: Sampler | None) -> None:
        self._low = low
        self._high = high
        self._integral = isinstance(low, int) and isinstance(high, int)
        self._sampler = sampler

    def generate(self) -> Some[float]:
        r = resolve(self._sampler)()
        if self._integral:
            span = int(self._high - self._low)
            return Some(self._low + min(int(r * span), span - 1))
        value = self._low + r * (self._high - self._low)
        return Some(min(value, math.nextafter(self._high, self._low)))


_NEVER = _Never()


def _debug(event: str, **fields: Any) -> None:
    if is_configured():
        logger.debug(event, **fields)


def _degenerate(combinator: str, reason: str) -> Generator[Any]:
    _debug('generator_degenerate', combinator=combinator, reason=reason)
    return _NEVER


def never() -> Generator[Any]:
    """Return a generator that always produces Nothing."""
    return _NEVER


def pure[T](value: T) -> Generator[T]:
    """Return a generator that always produces `Some(value)`."""
    return _Pure(value)


def one_of_values[T](*values: T, sampler: Sampler | None = None) -> Generator[T]:
    """Return a generator producing one of `values`, chosen uniformly.

    Args:
        *values: Candidate values. None given behaves as `never()`.
        sampler: Uniform random source; the process-wide one if None.
    """
    if not values:
        return _degenerate('one_of_values', 'no values')
    return _OneOf(tuple(_Pure(v) for v in values), sampler)


def one_of[T](*generators: Generator[T], sampler: Sampler | None = None) -> Generator[T]:
    """Return a generator delegating to one of `generators`, chosen uniformly.

    The chosen generator's result is returned verbatim, Nothing included.

    Args:
        *generators: Candidate generators. None given behaves as `never()`.
        sampler: Uniform random source; the process-wide one if None.
    """
    if not generators:
        return _degenerate('one_of', 'no generators')
    return _OneOf(generators, sampler)


def sequence_of_values[T](*values: T) -> Generator[T]:
    """Return a generator cycling through `values` in order, forever.

    Each call to this function starts a new cycle at the first value.
    The returned generator is stateful and not thread-safe.

    Example:
        ```python
        gen = sequence_of_values(0, 1, 2)
        [gen.generate().get() for _ in range(4)]  # [0, 1, 2, 0]
        ```
    """
    if not values:
        return _degenerate('sequence_of_values', 'no values')
    return _SequenceOf(tuple(_Pure(v) for v in values))


def sequence_of[T](*generators: Generator[T]) -> Generator[T]:
    """Return a generator delegating to `generators` in turn, forever.

    The cursor advances after every call even when the delegate produced
    Nothing; an empty draw is not retried on the next generator. The
    returned generator is stateful and not thread-safe.
    """
    if not generators:
        return _degenerate('sequence_of', 'no generators')
    return _SequenceOf(generators)


def _clamp(weight: float) -> float:
    # negative and NaN weights count as zero
    return float(weight) if weight > 0 else 0.0


def _rescale[T](entries: list[tuple[float, Generator[T]]]) -> list[tuple[float, Generator[T]]]:
    """Bring weights whose sum overflows back to a finite total.

    Infinite weights share the draw equally and outweigh every finite one;
    otherwise all weights are divided by the largest, keeping their ratios.
    """
    if any(math.isinf(weight) for weight, _ in entries):
        return [(1.0 if math.isinf(weight) else 0.0, gen) for weight, gen in entries]
    largest = max(weight for weight, _ in entries)
    return [(weight / largest, gen) for weight, gen in entries]


def frequency[T](
    *entries: tuple[float, Generator[T]],
    sampler: Sampler | None = None,
) -> Generator[T]:
    """Return a generator choosing among generators with relative weights.

    Weights are clamped to zero from below and need not sum to one. A draw
    `r` in [0, 1) selects the first entry whose running weight sum exceeds
    `r * total`, walking entries in the order given.

    Args:
        *entries: `(weight, generator)` pairs.
        sampler: Uniform random source; the process-wide one if None.

    Returns:
        The weighted generator, or `never()` when there are no entries or
        no positive weight.

    Example:
        ```python
        gen = frequency((0.1, pure(1)), (0.9, pure(2)), sampler=lambda: 0.05)
        assert gen.generate() == Some(1)
        ```
    """
    clamped = [(_clamp(weight), gen) for weight, gen in entries]
    if not clamped:
        return _degenerate('frequency', 'no entries')
    total = sum(weight for weight, _ in clamped)
    if total <= 0:
        return _degenerate('frequency', 'no positive weight')
    if math.isinf(total):
        clamped = _rescale(clamped)
        total = sum(weight for weight, _ in clamped)
    return _Frequency(clamped, total, sampler)


def frequency_of_values[T](
    *entries: tuple[float, T],
    sampler: Sampler | None = None,
) -> Generator[T]:
    """Return a generator choosing among values with relative weights.

    Same selection as `frequency`, with every value wrapped in `pure`.
    """
    return frequency(*((weight, _Pure(value)) for weight, value in entries), sampler=sampler)


def recursive[T](builder: Callable[[Lazy[Generator[T]]], Generator[T]]) -> Generator[T]:
    """Return a generator defined in terms of itself.

    `builder` receives a `Lazy` continuation and returns a generator. To
    stop, it returns a base-case generator such as `pure(x)`; to recurse,
    it forces the continuation, which calls `builder` again with a new
    continuation, and composes the result (usually with `map`).

    There is no depth bound: a builder that always recurses exhausts the
    stack with RecursionError.

    Example:
        ```python
        remaining = 3

        def countdown(recurse):
            global remaining
            remaining -= 1
            if remaining < 0:
                return pure('$')
            return recurse.force().map(lambda s: s + '.')

        recursive(countdown).generate()  # Some(value='$...')
        ```
    """
    return _Recursive(builder)


def choose(low: float, high: float, sampler: Sampler | None = None) -> Generator[float]:
    """Return a generator producing numbers uniformly in [low, high).

    With two `int` bounds the result is an `int`. `low == high` always
    produces `low`; `low > high` behaves as `never()`.
    """
    if low > high:
        return _degenerate('choose', 'empty range')
    if low == high:
        return _Pure(low)
    return _Choose(low, high, sampler)
