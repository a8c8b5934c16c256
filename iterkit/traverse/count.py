"""Counting and positional access

count, advance_by and nth only move the cursor, they never build a new
sequence."""

from __future__ import annotations

from kungfu import Nothing, Option, Some

from .._helpers import iterate, rewind_if_possible, step
from ..protocol import Seq

def count[T](source: Seq[T], *, visited: int = 0) -> int:
    """
    Total number of elements: visited (already passed before this call)
    plus the ones advanced over from the current cursor to the end.

    With the default visited=0 on a fresh sequence this is its size.
    A Rewindable source is rewound afterwards, so repeated calls agree.
    Anything else is left exhausted.
    """
    remaining = sum(1 for _ in iterate(source))
    rewind_if_possible(source)
    return visited + remaining

def advance_by[T](source: Seq[T], n: int, *, visited: int = 0) -> tuple[int, bool]:
    """
    Advance up to n times, stopping early when exhausted.

    visited is how many elements were already visited before this call.
    Returns (index of the last visited element or 0 if none, whether the
    last step produced an element).
    """
    steps, more = step(source, n)
    return last_index(visited + steps), more

def last_index(visited: int) -> int:
    """Zero-based index of the last of visited elements, 0 when none."""
    return max(visited - 1, 0)

def nth[T](source: Seq[T], n: int) -> Option[T]:
    """
    Element at position n counted from the current cursor, or Nothing().

    Rewindable sources are rewound afterwards.
    """
    if n < 0:
        return Nothing()
    found: Option[T] = Nothing()
    try:
        for _ in range(n + 1):
            found = source.advance()
            if not isinstance(found, Some):
                return Nothing()
    finally:
        rewind_if_possible(source)
    return found

__all__ = ("count", "advance_by", "last_index", "nth")
