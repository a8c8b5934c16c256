"""
Search combinators
==================

first / last: positional lookup by predicate over an Enumerable sequence.
Neither rewinds: first leaves the cursor right after the match, last
leaves the sequence exhausted.
"""

from __future__ import annotations

from dataclasses import dataclass

from kungfu import Nothing, Option, Some

from .._helpers import iterate_indexed, require
from .._types import Predicate
from ..protocol import Enumerable

@dataclass(frozen=True, slots=True)
class Indexed[T]:
    """Element together with its zero-based position."""

    index: int
    value: T

def first[T](source: object, predicate: Predicate[T]) -> Option[Indexed[T]]:
    """First (index, element) matching predicate. Stops at the match."""
    enumerable: Enumerable[T] = require(source, Enumerable, operation="first")
    # NOTE: линейный поиск, индекс знает только сама последовательность.
    for index, item in iterate_indexed(enumerable):
        if predicate(item):
            return Some(Indexed(index, item))
    return Nothing()

def last[T](source: object, predicate: Predicate[T]) -> Option[Indexed[T]]:
    """Last (index, element) matching predicate. Always scans to the end."""
    enumerable: Enumerable[T] = require(source, Enumerable, operation="last")
    seen: Option[Indexed[T]] = Nothing()
    for index, item in iterate_indexed(enumerable):
        if predicate(item):
            seen = Some(Indexed(index, item))
    return seen

__all__ = ("Indexed", "first", "last")
