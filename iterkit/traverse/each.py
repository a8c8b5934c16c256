from __future__ import annotations

from .._helpers import iterate, rewind_if_possible
from .._types import Action
from ..protocol import Seq

def each[T](source: Seq[T], action: Action[T]) -> None:
    """
    Run action on every element for its side effect.

    Rewindable sources are rewound afterwards (also when action raises) and
    can be traversed again right away; others end exhausted.
    """
    try:
        for item in iterate(source):
            action(item)
    finally:
        rewind_if_possible(source)

__all__ = ("each",)
