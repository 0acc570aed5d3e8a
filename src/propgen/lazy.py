"""Memoized deferred computation."""

from __future__ import annotations

from collections.abc import Callable

__all__ = ['Lazy']


class Lazy[T]:
    """A zero-argument computation evaluated at most once.

    The first `force()` calls the producer and caches its result; later
    calls return the cached value without calling the producer again, so
    its side effects happen exactly once.

    The producer must not force its own Lazy before returning. There is
    no re-entrancy guard.

    Examples:
        >>> calls = []
        >>> lazy = Lazy(lambda: calls.append(1) or len(calls))
        >>> lazy.force(), lazy.force()
        (1, 1)
    """

    __slots__ = ('_evaluated', '_producer', '_value')

    def __init__(self, producer: Callable[[], T]) -> None:
        self._producer = producer
        self._evaluated = False
        self._value: T | None = None

    @property
    def is_evaluated(self) -> bool:
        """True once force() has computed the value."""
        return self._evaluated

    def force(self) -> T:
        """Return the value, computing it on first call."""
        if not self._evaluated:
            self._value = self._producer()
            self._evaluated = True
        return self._value  # type: ignore[return-value]

    def __repr__(self) -> str:
        if self._evaluated:
            return f'Lazy({self._value!r})'
        return 'Lazy(<pending>)'
