from .filter import filter_, or_
from .map import every, map_

__all__ = (
    "filter_",
    "or_",
    "map_",
    "every",
)
