from .loader import ConfigError, load_config
from .models import AppConfig, LoggingConfig, WindowSortConfig
from .wiring import build_log_sink, build_sorter

# Config exports are intentionally small.
__all__ = [
    "AppConfig",
    "ConfigError",
    "LoggingConfig",
    "WindowSortConfig",
    "build_log_sink",
    "build_sorter",
    "load_config",
]
