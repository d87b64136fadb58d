from .order import Reverse

# Public domain exports keep imports explicit across layers.
__all__ = ["Reverse"]
