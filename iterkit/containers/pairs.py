from __future__ import annotations

from ..pair import Pair
from .base import ListSeq

class Pairs[A, B](ListSeq[Pair[A, B]]):
    """Sequence of Pair, the output container of zip."""

    __slots__ = ()

__all__ = ("Pairs",)
