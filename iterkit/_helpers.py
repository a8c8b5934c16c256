"""Internal helpers for iterkit.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used when writing custom
combinators on top of the capability protocol."""

from __future__ import annotations

from collections.abc import Iterator

from kungfu import Some

from ._errors import CapabilityError, ConstructionError
from .protocol import Enumerable, Rewindable, Seq

def require[S](sequence: object, capability: type[S], *, operation: str) -> S:
    """
    Check that sequence implements capability, narrowing its type.

    Raises CapabilityError before anything is consumed.
    """
    if not isinstance(sequence, capability):
        raise CapabilityError(operation, capability.__name__, type(sequence).__name__)
    return sequence

def construct[T](sequence: Seq[T]) -> Seq[T]:
    """
    Call sequence.empty(), turning any failure into ConstructionError.

    A sequence that cannot build a sibling is a broken implementation,
    not something a caller can recover from.
    """
    try:
        return sequence.empty()
    except Exception as exc:
        raise ConstructionError(type(sequence).__name__) from exc

def rewind_if_possible(sequence: object) -> bool:
    """Rewind when the sequence supports it. Returns whether it did."""
    if isinstance(sequence, Rewindable):
        sequence.rewind()
        return True
    return False

# Traversal drivers
def iterate[T](sequence: Seq[T]) -> Iterator[T]:
    """
    Yield what advance() produces until it stops returning Some.

    Callers drain this within the same call, so combinators stay eager.
    """
    while True:
        match sequence.advance():
            case Some(item):
                yield item
            case _:
                return

def iterate_indexed[T](sequence: Enumerable[T]) -> Iterator[tuple[int, T]]:
    """Same as iterate, over advance_indexed()."""
    while True:
        match sequence.advance_indexed():
            case Some((index, item)):
                yield index, item
            case _:
                return

def step[T](sequence: Seq[T], n: int) -> tuple[int, bool]:
    """
    Advance up to n times.

    Returns (steps that produced an element, whether the last step produced one).
    For n <= 0 nothing is advanced and the flag is False.
    """
    steps = 0
    for _ in range(n):
        if not isinstance(sequence.advance(), Some):
            return steps, False
        steps += 1
    return steps, steps > 0

__all__ = (
    "require",
    "construct",
    "rewind_if_possible",
    "iterate",
    "iterate_indexed",
    "step",
)
