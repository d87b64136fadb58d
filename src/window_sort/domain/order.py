from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True, eq=False)
class Reverse(Generic[T]):
    """Order-reversing wrapper: ``Reverse(a) < Reverse(b)`` iff ``b < a``.

    Wrapping items before they enter a max-first sorter turns it into a
    min-first one; ``unwrap`` restores the original value on the way out.
    """

    value: T

    def __lt__(self, other: Reverse[Any]) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value < self.value

    def __le__(self, other: Reverse[Any]) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value <= self.value

    def __gt__(self, other: Reverse[Any]) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value > self.value

    def __ge__(self, other: Reverse[Any]) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value >= self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((Reverse, self.value))

    @staticmethod
    def unwrap(wrapped: Reverse[T]) -> T:
        # Plain function form so it can be passed to map().
        return wrapped.value
