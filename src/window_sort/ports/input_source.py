from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable


# InputSource port defines how items enter a sorter from outside the process (files, streams).
@runtime_checkable
class InputSource(Protocol):
    def read(self) -> Iterable[object]:
        """Yield items lazily in source order."""
        # Port contract has no implementation; calling it directly is a wiring error.
        raise NotImplementedError("InputSource is a port; use a concrete adapter.")
