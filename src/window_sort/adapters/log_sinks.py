from __future__ import annotations

import json
from pathlib import Path

from window_sort.observability.logging import LogMessage, log_to_dict
from window_sort.ports.log_sink import LogSink


class StdoutLogSink(LogSink):
    # Minimal structured log sink: one compact JSON object per line on stdout.
    def emit(self, message: LogMessage) -> None:
        print(json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False))

    def close(self) -> None:
        return None


class JsonlLogSink(LogSink):
    # File-backed structured log sink; appends and flushes per record.
    def __init__(self, path: Path) -> None:
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self._path.open("a", encoding="utf-8")

    def emit(self, message: LogMessage) -> None:
        payload = json.dumps(log_to_dict(message), separators=(",", ":"), ensure_ascii=False)
        self._file.write(payload + "\n")
        self._file.flush()

    def close(self) -> None:
        # Close is idempotent so callers can close unconditionally.
        if not self._file.closed:
            self._file.close()
