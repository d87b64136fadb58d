from .fluent import Chainable, Stream, stream
from .sorter import WindowSort, window_sort
from .window import Window

__all__ = ["Chainable", "Stream", "Window", "WindowSort", "stream", "window_sort"]
