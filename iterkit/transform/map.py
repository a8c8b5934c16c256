"""
Map combinators
===============

Element-wise transforms that keep the element type.
"""

from __future__ import annotations

from .._helpers import construct, iterate, iterate_indexed, require
from .._types import IndexedMapper, Mapper
from ..protocol import Enumerable, Seq

def map_[T](source: Seq[T], transform: Mapper[T]) -> Seq[T]:
    """Apply transform to every element. transform runs now, not on later reads."""
    result = construct(source)
    for item in iterate(source):
        result.append(transform(item))
    return result

def every[T](source: Seq[T], transform: IndexedMapper[T]) -> Seq[T]:
    """
    Like map_, but transform also receives the element's position.

    Requires Enumerable: the index comes from the sequence itself.
    """
    enumerable: Enumerable[T] = require(source, Enumerable, operation="every")
    result = construct(source)
    for index, item in iterate_indexed(enumerable):
        result.append(transform(index, item))
    return result

__all__ = ("map_", "every")
