from __future__ import annotations

from typing import Protocol, runtime_checkable

from window_sort.observability.logging import LogMessage


# LogSink is the port sorters report diagnostics through; adapters decide where records go.
@runtime_checkable
class LogSink(Protocol):
    def emit(self, message: LogMessage) -> None:
        """Consume one LogMessage."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")

    def close(self) -> None:
        """Close the sink and release resources."""
        raise NotImplementedError("LogSink is a port; use a concrete adapter.")
