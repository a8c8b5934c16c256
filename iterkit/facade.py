"""
Fluent facade over the adapter engine.

Iter owns exactly one sequence. Producing combinators (filter, map, every,
or_, chain, zip, into, from_) hand that sequence to the engine and return a
new Iter over the result; the receiver is left consumed and raises
ConsumedError from then on. Inspecting operations (each, count, advance_by,
nth, first, last, collect) work on the held sequence in place.

Example:
    from iterkit import strings

    result = (
        strings(["abc", "bbc", "abccd"])
        .filter(lambda s: s.startswith("ab"))
        .map(str.upper)
        .collect()
    )  # ["ABC", "ABCCD"]
"""

from __future__ import annotations

import typing
from collections.abc import Iterable

from kungfu import Option

from ._errors import ConsumedError
from ._helpers import step
from ._types import Action, Converter, IndexedMapper, Mapper, Predicate
from .collect import collect
from .combine import chain, zip_
from .containers import Strings
from .convert import from_, into
from .pair import Pair
from .protocol import Rewindable, Seq
from .search import Indexed, first, last
from .transform import every, filter_, map_, or_
from .traverse import count, each, last_index, nth

class Iter[T]:
    """Chainable handle owning one sequence."""

    __slots__ = ("_seq", "_visited")

    def __init__(self, seq: Seq[T], /) -> None:
        self._seq: Seq[T] | None = seq
        # Elements visited by advance_by/count since the last rewind
        self._visited = 0

    # Ownership

    def _held(self, operation: str) -> Seq[T]:
        if self._seq is None:
            raise ConsumedError(operation)
        return self._seq

    def _release(self) -> None:
        self._seq = None
        self._visited = 0

    @staticmethod
    def _operand[U](other: Seq[U] | Iter[U], operation: str) -> Seq[U]:
        if isinstance(other, Iter):
            return other._held(operation)
        return other

    @staticmethod
    def _release_operand(other: object) -> None:
        if isinstance(other, Iter):
            other._release()

    def _rewound(self, seq: Seq[T]) -> None:
        if isinstance(seq, Rewindable):
            self._visited = 0

    # Producing combinators

    def filter(self, predicate: Predicate[T]) -> Iter[T]:
        result = filter_(self._held("filter"), predicate)
        self._release()
        return Iter(result)

    def map(self, transform: Mapper[T]) -> Iter[T]:
        result = map_(self._held("map"), transform)
        self._release()
        return Iter(result)

    def every(self, transform: IndexedMapper[T]) -> Iter[T]:
        """Map with (index, element). Requires an Enumerable sequence."""
        result = every(self._held("every"), transform)
        self._release()
        return Iter(result)

    def or_(self, predicate: Predicate[T], default: T) -> Iter[T]:
        """Replace elements failing predicate with default."""
        result = or_(self._held("or_"), predicate, default)
        self._release()
        return Iter(result)

    def chain(self, other: Seq[T] | Iter[T]) -> Iter[T]:
        result = chain(self._held("chain"), self._operand(other, "chain"))
        self._release_operand(other)
        self._release()
        return Iter(result)

    def zip[U](self, other: Seq[U] | Iter[U]) -> Iter[Pair[T, U]]:
        result = zip_(self._held("zip"), self._operand(other, "zip"))
        self._release_operand(other)
        self._release()
        return Iter(result)

    def into[U, E](self, target: Seq[U], convert: Converter[T, U, E]) -> Iter[U]:
        """
        Convert into target, a sequence of another element type.

        Elements whose conversion returns Error are dropped.
        """
        result = into(self._held("into"), target, convert)
        self._release()
        return Iter(result)

    def from_[U, E](self, other: Seq[U] | Iter[U], convert: Converter[U, T, E]) -> Iter[T]:
        """
        Fill this sequence's element type from other.

        A Resettable held sequence is cleared and reused as the destination.
        """
        result = from_(self._operand(other, "from_"), self._held("from_"), convert)
        self._release_operand(other)
        self._release()
        return Iter(result)

    # Inspecting operations

    def each(self, action: Action[T]) -> None:
        seq = self._held("each")
        try:
            each(seq, action)
        finally:
            self._rewound(seq)

    def count(self) -> int:
        """
        Elements visited since the last rewind plus those left to visit.

        Running total: advance_by steps are included, and on a sequence
        that cannot rewind later calls keep reporting the same total.
        """
        seq = self._held("count")
        self._visited = count(seq, visited=self._visited)
        total = self._visited
        if isinstance(seq, Rewindable):
            self._visited = 0
        return total

    def advance_by(self, n: int) -> tuple[int, bool]:
        """
        Advance up to n elements.

        Returns (index of the last element visited since the last rewind,
        or 0 if none; whether the last step produced an element).
        """
        steps, more = step(self._held("advance_by"), n)
        self._visited += steps
        return last_index(self._visited), more

    def nth(self, n: int) -> Option[T]:
        seq = self._held("nth")
        try:
            return nth(seq, n)
        finally:
            self._rewound(seq)

    def first(self, predicate: Predicate[T]) -> Option[Indexed[T]]:
        return first(self._held("first"), predicate)

    def last(self, predicate: Predicate[T]) -> Option[Indexed[T]]:
        return last(self._held("last"), predicate)

    def collect(self) -> typing.Any:
        """Backing collection of the held sequence. Requires Materializable."""
        return collect(self._held("collect"))

    def __repr__(self) -> str:
        if self._seq is None:
            return "Iter(<consumed>)"
        return f"Iter({self._seq!r})"

def strings(items: Iterable[str] = (), /) -> Iter[str]:
    """Default entry point: Iter over a Strings container."""
    return Iter(Strings(items))

__all__ = ("Iter", "strings")
