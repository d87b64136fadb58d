from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from window_sort.core.hints import SizeHint, counted_hint, sized_length

if TYPE_CHECKING:
    from window_sort.core.sorter import WindowSort
    from window_sort.ports.log_sink import LogSink

T = TypeVar("T")
U = TypeVar("U")


class Chainable(ABC, Generic[T]):
    # Fluent iterator base shared by Stream and WindowSort; every step stays lazy.

    def __iter__(self) -> Chainable[T]:
        return self

    @abstractmethod
    def __next__(self) -> T:
        raise NotImplementedError

    def map(self, fn: Callable[[T], U]) -> Stream[U]:
        return Stream(self, fn)

    def window_sort(
        self,
        window_size: int,
        *,
        key: Callable[[T], Any] | None = None,
        log_sink: LogSink | None = None,
    ) -> WindowSort[T]:
        from window_sort.core.sorter import WindowSort

        return WindowSort(self, window_size, key=key, log_sink=log_sink)

    @abstractmethod
    def size_hint(self) -> SizeHint:
        raise NotImplementedError

    def __length_hint__(self) -> int:
        return self.size_hint()[0]


class Stream(Chainable[T], Generic[T]):
    """Chainable wrapper over any iterable.

    ``stream(items).map(Reverse).window_sort(8).map(Reverse.unwrap)`` reads
    left to right and is equivalent to nesting the calls by hand.
    """

    def __init__(self, iterable: Iterable[Any], fn: Callable[[Any], T] | None = None) -> None:
        self._remaining = sized_length(iterable)
        self._source = iter(iterable)
        self._fn = fn

    def __next__(self) -> T:
        item = next(self._source)
        if self._remaining is not None:
            self._remaining -= 1
        if self._fn is None:
            return item
        return self._fn(item)

    def size_hint(self) -> SizeHint:
        # map() is one-to-one, so the source's hint carries over unchanged.
        return counted_hint(self._source, self._remaining)


def stream(iterable: Iterable[T]) -> Stream[T]:
    return Stream(iterable)
