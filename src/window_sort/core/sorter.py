from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from window_sort.core.fluent import Chainable
from window_sort.core.hints import SizeHint, counted_hint, shift_hint, sized_length
from window_sort.core.window import Window
from window_sort.observability.logging import LogMessage
from window_sort.ports.log_sink import LogSink

T = TypeVar("T")


class WindowSort(Chainable[T], Generic[T]):
    """Iterator that sorts its input within a sliding window.

    Up to ``window_size`` items are buffered in a max-heap; each ``next()``
    tops the heap up from the input and then yields the largest buffered item.
    Two items closer than ``window_size`` positions in the input come out in
    sorted (descending) order; items further apart keep no guarantee.

    Memory stays bounded by ``window_size`` however long the input is. Items
    still buffered when the sorter is dropped are discarded, so drain it to
    see everything. Wrap items in ``Reverse`` (or pass ``key``) to flip the
    direction to ascending.

    ``window_size`` is not validated; ``0`` and ``1`` both pass items through
    in their original order.
    """

    def __init__(
        self,
        iterable: Iterable[T],
        window_size: int,
        *,
        key: Callable[[T], Any] | None = None,
        log_sink: LogSink | None = None,
        close_log_sink: bool = False,
    ) -> None:
        self._remaining = sized_length(iterable)
        self._source = iter(iterable)
        self._window_size = window_size
        # A zero-size window still needs one slot for the item being handed through.
        self._capacity = max(window_size, 1)
        self._window: Window[T] = Window(key)
        self._log_sink = log_sink
        # Set only when the sorter owns the sink; it is then closed once exhaustion is logged.
        self._close_log_sink = close_log_sink
        self._source_done = False
        self._exhausted = False
        self._emitted = 0

    @property
    def window_size(self) -> int:
        return self._window_size

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def buffered(self) -> int:
        return len(self._window)

    def __next__(self) -> T:
        window = self._window
        # Exhaustion is latched: once the input stops, it is never polled again.
        while not self._source_done and len(window) < self._capacity:
            try:
                item = next(self._source)
            except StopIteration:
                self._source_done = True
                break
            if self._remaining is not None:
                self._remaining -= 1
            window.push(item)

        if not window:
            self._mark_exhausted()
            raise StopIteration
        self._emitted += 1
        return window.pop_max()

    def size_hint(self) -> SizeHint:
        if self._source_done:
            source_hint: SizeHint = (0, 0)
        else:
            source_hint = counted_hint(self._source, self._remaining)
        return shift_hint(source_hint, len(self._window))

    def _mark_exhausted(self) -> None:
        if self._exhausted:
            return
        self._exhausted = True
        if self._log_sink is None:
            return
        self._log_sink.emit(
            LogMessage(
                level="debug",
                message="window_sort.exhausted",
                fields={
                    "window_size": self._window_size,
                    "emitted": self._emitted,
                    "peak_window": self._window.peak,
                },
            )
        )
        if self._close_log_sink:
            self._log_sink.close()

    def __repr__(self) -> str:
        state = "exhausted" if self._exhausted else "active"
        return f"WindowSort(window_size={self._window_size}, buffered={len(self._window)}, {state})"


def window_sort(
    iterable: Iterable[T],
    window_size: int,
    *,
    key: Callable[[T], Any] | None = None,
    log_sink: LogSink | None = None,
    close_log_sink: bool = False,
) -> WindowSort[T]:
    # Free-function form of WindowSort construction.
    return WindowSort(iterable, window_size, key=key, log_sink=log_sink, close_log_sink=close_log_sink)
