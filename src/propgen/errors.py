"""Error types: dual struct+exception for Maybe-based and raise-based code."""

from __future__ import annotations

import msgspec

__all__ = [
    'EmptyValue',
    'EmptyValueError',
]


class EmptyValue(msgspec.Struct, frozen=True, gc=False):
    """No value was produced - struct variant for reporting an empty draw."""

    message: str | None = None

    def to_exception(self) -> EmptyValueError:
        """Convert to exception for raise-based code."""
        return EmptyValueError(self.message)


class EmptyValueError(RuntimeError):
    """A value was requested from Nothing - exception variant."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(message or 'Empty value')

    def to_struct(self) -> EmptyValue:
        """Convert to struct for Maybe-based code."""
        return EmptyValue(self.message)
