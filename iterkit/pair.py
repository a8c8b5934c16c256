"""
Pair - two-slot value produced by zip
=====================================
"""

from __future__ import annotations

from dataclasses import dataclass

@dataclass(frozen=True, slots=True)
class Pair[A, B]:
    """Immutable (first, second) couple, elements may differ in type."""

    first: A
    second: B

    def __str__(self) -> str:
        return f"{{{self.first}, {self.second}}}"

__all__ = ("Pair",)
