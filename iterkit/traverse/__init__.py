from .count import advance_by, count, last_index, nth
from .each import each

__all__ = (
    "each",
    "count",
    "advance_by",
    "last_index",
    "nth",
)
