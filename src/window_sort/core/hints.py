from __future__ import annotations

import operator
from typing import Any

SizeHint = tuple[int, "int | None"]


def size_hint_of(source: Any) -> SizeHint:
    # Best-effort (lower, upper) remaining-count estimate for an input iterator.
    # Explicit size_hint() wins, then len(), then the length_hint protocol as a lower bound only.
    hint = getattr(source, "size_hint", None)
    if callable(hint):
        lower, upper = hint()
        return lower, upper
    try:
        exact = len(source)
    except TypeError:
        return operator.length_hint(source, 0), None
    return exact, exact


def shift_hint(hint: SizeHint, extra: int) -> SizeHint:
    lower, upper = hint
    return lower + extra, (None if upper is None else upper + extra)


def sized_length(iterable: Any) -> int | None:
    # Length of a sized container, taken before iter() hides it; None for plain iterators.
    try:
        return len(iterable)
    except TypeError:
        return None


def counted_hint(source: Any, remaining: int | None) -> SizeHint:
    # Exact bounds while a sized input is being counted down, otherwise the iterator's own hint.
    if remaining is not None:
        remaining = max(remaining, 0)
        return remaining, remaining
    return size_hint_of(source)
