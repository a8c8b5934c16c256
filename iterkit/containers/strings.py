from __future__ import annotations

from .base import ListSeq

class Strings(ListSeq[str]):
    """Sequence of str. The default container for Iter pipelines."""

    __slots__ = ()

__all__ = ("Strings",)
