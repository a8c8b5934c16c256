"""
Zip combinators
===============

Lock-step pairing of two sequences into a Pairs container.
"""

from __future__ import annotations

from kungfu import Some

from ..containers import Pairs
from ..pair import Pair
from ..protocol import Seq

def zip_[A, B](left: Seq[A], right: Seq[B]) -> Pairs[A, B]:
    """
    Pair up elements until either side runs out.

    Result size is min(len(left), len(right)). Both sides are advanced once
    per step, so the longer one loses one extra element to the final step.
    """
    result: Pairs[A, B] = Pairs()
    while True:
        match left.advance(), right.advance():
            case Some(a), Some(b):
                result.append(Pair(a, b))
            case _:
                return result

__all__ = ("zip_",)
