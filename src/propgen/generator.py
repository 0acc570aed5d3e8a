"""Generator protocol: the capability every combinator produces.

Uses PEP 695 type parameter syntax (Python 3.12+). A generator yields
`Some(value)` or `Nothing` on each `generate()` call. Concrete generators
subclass `Generator` explicitly to inherit `map`, `flat_map` and `filter`.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Protocol

from propgen.maybe import Maybe, Nothing

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = ['Generator']


class Generator[T](Protocol):
    """Protocol for producing zero or one value per call.

    Implementations are either stateless (the result depends only on the
    random source) or hold private cursor state advanced by each call.

    Type Parameters:
        T: The type of values produced.
    """

    @abstractmethod
    def generate(self) -> Maybe[T]:
        """Produce the next sample.

        Synchronous and free of I/O. May read the random source.

        Returns:
            `Some(value)` when a sample is available, `Nothing` otherwise.

        Example:
            ```python
            match gen.generate():
                case Some(value): use(value)
                case _: skip()
            ```
        """
        ...

    def map[U](self, f: Callable[[T], U]) -> Generator[U]:
        """Return a generator applying `f` to every produced value.

        Example:
            ```python
            doubled = pure(21).map(lambda x: x * 2)
            assert doubled.generate() == Some(42)
            ```
        """
        return _Mapped(self, f)

    def flat_map[U](self, f: Callable[[T], Generator[U]]) -> Generator[U]:
        """Return a generator delegating to `f(value)` for every produced value."""
        return _FlatMapped(self, f)

    def filter(self, predicate: Callable[[T], bool]) -> Generator[T]:
        """Return a generator yielding Nothing for values failing `predicate`.

        Rejected draws are not retried.
        """
        return _Filtered(self, predicate)


class _Mapped[T, U](Generator[U]):
    __slots__ = ('_f', '_source')

    def __init__(self, source: Generator[T], f: Callable[[T], U]) -> None:
        self._source = source
        self._f = f

    def generate(self) -> Maybe[U]:
        return self._source.generate().map(self._f)


class _FlatMapped[T, U](Generator[U]):
    __slots__ = ('_f', '_source')

    def __init__(self, source: Generator[T], f: Callable[[T], Generator[U]]) -> None:
        self._source = source
        self._f = f

    def generate(self) -> Maybe[U]:
        drawn = self._source.generate()
        if drawn.is_none():
            return Nothing
        return self._f(drawn.value).generate()


class _Filtered[T](Generator[T]):
    __slots__ = ('_predicate', '_source')

    def __init__(self, source: Generator[T], predicate: Callable[[T], bool]) -> None:
        self._source = source
        self._predicate = predicate

    def generate(self) -> Maybe[T]:
        return self._source.generate().filter(self._predicate)
