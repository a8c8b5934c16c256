from .base import ListSeq
from .pairs import Pairs
from .strings import Strings

__all__ = (
    "ListSeq",
    "Pairs",
    "Strings",
)
