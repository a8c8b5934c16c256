"""
Capability protocol
===================

The contract a container must satisfy to take part in iterkit pipelines.

Required (``Seq``):
- empty()   - fresh, independent, empty instance of the same element type
- append()  - push one element, insertion order is traversal order
- advance() - next unvisited element as ``Some(item)``, ``Nothing()`` when exhausted

Optional capabilities (implement zero or more):
- Enumerable     - advance_indexed() also yields the zero-based position
- Rewindable     - rewind() moves the cursor back before the first element
- Resettable     - clear() drops all data and rewinds
- Materializable - to_native() exposes the backing collection

Capabilities are detected with ``isinstance`` against the runtime-checkable
protocols below; operations that need one fail with ``CapabilityError``
before touching the sequence.

Traversal state per instance: Ready (cursor before start) -> Iterating ->
Exhausted. A sequence that is neither Rewindable nor Resettable goes through
this exactly once.

NOTE: Single owner, synchronous. Cursor and storage are plain mutable state,
driving one instance from several threads is undefined.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from kungfu import Option

@runtime_checkable
class Seq[T](Protocol):
    """Minimal traversable sequence."""

    def empty(self) -> Seq[T]:
        """Build a fresh empty sequence of the same element type."""
        ...

    def append(self, item: T, /) -> None:
        """Append one element."""
        ...

    def advance(self) -> Option[T]:
        """Next element, or Nothing() once exhausted."""
        ...

@runtime_checkable
class Enumerable[T](Protocol):
    def advance_indexed(self) -> Option[tuple[int, T]]:
        """Like advance(), paired with the element's position."""
        ...

@runtime_checkable
class Rewindable(Protocol):
    def rewind(self) -> None:
        """Move the cursor back to the start, keeping the data."""
        ...

@runtime_checkable
class Resettable(Protocol):
    def clear(self) -> None:
        """Discard all data and reset the cursor."""
        ...

@runtime_checkable
class Materializable[N](Protocol):
    def to_native(self) -> N:
        """Backing collection, by reference."""
        ...

__all__ = (
    "Seq",
    "Enumerable",
    "Rewindable",
    "Resettable",
    "Materializable",
)
