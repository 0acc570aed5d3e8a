"""Maybe type: Some[T] | Nothing, the result of every generate() call."""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn, TypeIs

import msgspec

from propgen.errors import EmptyValueError

__all__ = ['Maybe', 'Nothing', 'NothingType', 'Some']


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Maybe holding exactly one value of type T.

    Examples:
        >>> Some(42).get()
        42
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def get(self) -> T:
        """Return the wrapped value."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply `f` to the wrapped value and wrap the result."""
        return Some(f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Keep the value only if `predicate` holds for it."""
        if predicate(self.value):
            return self
        return Nothing


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe: no value was produced.

    Use the `Nothing` constant rather than instantiating directly; any
    instance compares equal to it.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.map(lambda x: x * 2)
        NothingType()
    """

    def is_some(self) -> TypeIs[Some[object]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def get(self) -> NoReturn:
        """Raise since there is no value to extract.

        Raises:
            EmptyValueError: Always.
        """
        raise EmptyValueError()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing without calling `_f`."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Maybe[T] = Some[T] | NothingType
