"""Bounded-memory partial sorting for nearly-sorted streams.

``window_sort(items, k)`` yields ``items`` largest-first within any span of
``k`` consecutive positions, buffering at most ``k`` of them::

    >>> list(window_sort([4, 2, 3, 1], 2))
    [4, 3, 2, 1]
    >>> list(stream([1, 4, 2, 3]).map(Reverse).window_sort(2).map(Reverse.unwrap))
    [1, 2, 3, 4]
"""

from .core import Chainable, Stream, Window, WindowSort, stream, window_sort
from .domain import Reverse

__all__ = [
    "Chainable",
    "Reverse",
    "Stream",
    "Window",
    "WindowSort",
    "stream",
    "window_sort",
]
