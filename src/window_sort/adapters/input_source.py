from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from window_sort.ports.input_source import InputSource


@dataclass(frozen=True, slots=True)
class FileLineInputSource(InputSource):
    # File-based InputSource adapter: each line becomes one item via line_builder.
    path: Path
    line_builder: Callable[[int, str], object]
    encoding: str = "utf-8"

    def read(self) -> Iterable[object]:
        # File is streamed line-by-line so a sorter over it stays bounded by its window.
        with self.path.open("r", encoding=self.encoding) as handle:
            for idx, line in enumerate(handle, start=1):
                yield self.line_builder(idx, line.rstrip("\n"))
