"""Filter combinators

Keep or replace elements by predicate. Both drain the source eagerly."""

from __future__ import annotations

from .._helpers import construct, iterate
from .._types import Predicate
from ..protocol import Seq

def filter_[T](source: Seq[T], predicate: Predicate[T]) -> Seq[T]:
    """Keep elements for which predicate is true, in order."""
    result = construct(source)
    for item in iterate(source):
        if predicate(item):
            result.append(item)
    return result

def or_[T](source: Seq[T], predicate: Predicate[T], default: T) -> Seq[T]:
    """
    Keep elements passing predicate, replace the rest with default.

    Size and order are those of the source.
    """
    result = construct(source)
    for item in iterate(source):
        result.append(item if predicate(item) else default)
    return result

__all__ = ("filter_", "or_")
