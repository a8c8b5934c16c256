"""
List-backed sequence
====================

Reference implementation of the full capability protocol.
Element-typed containers (Strings, Pairs) specialize it.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from kungfu import Nothing, Option, Some

# Cursor position before the first element (Ready state)
_BEFORE_START = -1

class ListSeq[T]:
    """
    Ordered list of elements plus a traversal cursor.

    Implements Seq, Enumerable, Rewindable, Resettable and Materializable.
    The cursor moves from before-start through each index. Once exhausted it
    stays on the last element, so items appended later are still reached.
    """

    __slots__ = ("_cursor", "_data")

    def __init__(self, items: Iterable[T] = (), /) -> None:
        self._data: list[T] = list(items)
        self._cursor = _BEFORE_START

    def empty(self) -> Self:
        return type(self)()

    def append(self, item: T, /) -> None:
        self._data.append(item)

    def advance(self) -> Option[T]:
        if self._move():
            return Some(self._data[self._cursor])
        return Nothing()

    def advance_indexed(self) -> Option[tuple[int, T]]:
        if self._move():
            return Some((self._cursor, self._data[self._cursor]))
        return Nothing()

    def rewind(self) -> None:
        self._cursor = _BEFORE_START

    def clear(self) -> None:
        # New list: a previously collected native list stays intact.
        self.rewind()
        self._data = []

    def to_native(self) -> list[T]:
        return self._data

    def _move(self) -> bool:
        if self._cursor + 1 < len(self._data):
            self._cursor += 1
            return True
        return False

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

__all__ = ("ListSeq",)
