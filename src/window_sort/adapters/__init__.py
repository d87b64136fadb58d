from .input_source import FileLineInputSource
from .log_sinks import JsonlLogSink, StdoutLogSink

# Public adapter exports are optional but make wiring simpler.
__all__ = ["FileLineInputSource", "JsonlLogSink", "StdoutLogSink"]
