from __future__ import annotations

from .._helpers import construct, iterate
from ..protocol import Seq

def chain[T](first: Seq[T], second: Seq[T]) -> Seq[T]:
    """All of first, then all of second, in a new sequence of first's type."""
    result = construct(first)
    for source in (first, second):
        for item in iterate(source):
            result.append(item)
    return result

__all__ = ("chain",)
