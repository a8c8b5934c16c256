from .find import Indexed, first, last

__all__ = ("Indexed", "first", "last")
