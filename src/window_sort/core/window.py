from __future__ import annotations

import heapq
from collections.abc import Callable
from itertools import count
from typing import Any, Generic, TypeVar

from window_sort.domain.order import Reverse

T = TypeVar("T")


class Window(Generic[T]):
    # Bounded-by-caller max-heap over buffered items; heapq is min-first, so keys are stored reversed.
    # Entries are (Reverse(key), seq, item): items themselves are never compared, and equal keys
    # leave the window in arrival order.
    __slots__ = ("_heap", "_key", "_seq", "_peak")

    def __init__(self, key: Callable[[T], Any] | None = None) -> None:
        self._heap: list[tuple[Reverse[Any], int, T]] = []
        self._key = key
        self._seq = count()
        self._peak = 0

    def push(self, item: T) -> None:
        sort_key = item if self._key is None else self._key(item)
        heapq.heappush(self._heap, (Reverse(sort_key), next(self._seq), item))
        if len(self._heap) > self._peak:
            self._peak = len(self._heap)

    def pop_max(self) -> T:
        # IndexError on empty window, same as heapq.heappop.
        return heapq.heappop(self._heap)[2]

    def peek_max(self) -> T:
        return self._heap[0][2]

    @property
    def peak(self) -> int:
        # Largest size the window has reached; used for exhaustion diagnostics.
        return self._peak

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"Window(size={len(self._heap)}, peak={self._peak})"
