from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Config models map YAML sections to typed structures.


class WindowSortConfig(BaseModel):
    # Sorter settings: window span and emission direction.
    model_config = ConfigDict(extra="forbid")
    window_size: int = Field(ge=0)
    order: Literal["max_first", "min_first"] = "max_first"


class LoggingConfig(BaseModel):
    # Log sink selector: only one sink is active at a time.
    model_config = ConfigDict(extra="forbid")
    sink: Literal["stdout", "jsonl", "none"] = "none"
    path: str | None = None

    @model_validator(mode="after")
    def _require_path(self) -> LoggingConfig:
        # For jsonl sink, a path is required to avoid silent defaults.
        if self.sink == "jsonl" and not self.path:
            raise ValueError("logging.path is required when sink is 'jsonl'")
        return self


class AppConfig(BaseModel):
    # AppConfig is the top-level typed view of configuration.
    model_config = ConfigDict(extra="forbid")
    version: int
    window_sort: WindowSortConfig
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
