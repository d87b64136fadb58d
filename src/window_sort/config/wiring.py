from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from window_sort.adapters.log_sinks import JsonlLogSink, StdoutLogSink
from window_sort.config.models import AppConfig, LoggingConfig
from window_sort.core.fluent import Chainable, Stream
from window_sort.core.sorter import WindowSort
from window_sort.domain.order import Reverse
from window_sort.ports.log_sink import LogSink


def build_log_sink(config: LoggingConfig) -> LogSink | None:
    # Sink selection mirrors logging.sink; "none" disables diagnostics entirely.
    if config.sink == "stdout":
        return StdoutLogSink()
    if config.sink == "jsonl":
        assert config.path is not None
        return JsonlLogSink(Path(config.path))
    return None


def build_sorter(
    iterable: Iterable[Any],
    config: AppConfig,
    *,
    log_sink: LogSink | None = None,
) -> Chainable[Any]:
    # An explicit log_sink overrides the configured one and stays owned by the caller.
    # A sink built from config belongs to the sorter, which closes it once exhausted.
    owns_sink = log_sink is None
    sink = log_sink if log_sink is not None else build_log_sink(config.logging)
    settings = config.window_sort
    if settings.order == "min_first":
        # Items travel through the window wrapped, and come out unwrapped.
        wrapped = WindowSort(
            Stream(iterable, Reverse),
            settings.window_size,
            log_sink=sink,
            close_log_sink=owns_sink,
        )
        return wrapped.map(Reverse.unwrap)
    return WindowSort(iterable, settings.window_size, log_sink=sink, close_log_sink=owns_sink)
