from .into import from_, into

__all__ = ("into", "from_")
