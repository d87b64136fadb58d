from __future__ import annotations

import random
from pathlib import Path

from window_sort import Reverse, stream
from window_sort.adapters.input_source import FileLineInputSource
from window_sort.config import build_sorter, load_config


def test_jittered_timestamps_are_restored_to_ascending_order(tmp_path: Path) -> None:
    # Arrival jitter smaller than the window is fully undone for ascending output.
    rng = random.Random(42)
    timestamps = list(range(1_000))
    jittered = list(timestamps)
    for start in range(0, len(jittered), 4):
        block = jittered[start : start + 4]
        rng.shuffle(block)
        jittered[start : start + 4] = block

    data = tmp_path / "events.txt"
    data.write_text("\n".join(str(ts) for ts in jittered) + "\n", encoding="utf-8")
    config = tmp_path / "config.yml"
    config.write_text("version: 1\nwindow_sort:\n  window_size: 4\n  order: min_first\n", encoding="utf-8")

    source = FileLineInputSource(path=data, line_builder=lambda idx, text: int(text))
    sorter = build_sorter(source.read(), load_config(config))
    assert list(sorter) == timestamps


def test_fluent_pipeline_matches_config_pipeline() -> None:
    items = [2, 1, 4, 3, 6, 5]
    fluent = stream(items).map(Reverse).window_sort(2).map(Reverse.unwrap)
    assert list(fluent) == [1, 2, 3, 4, 5, 6]
