"""
Core type definitions for iterkit.

Типы функций, которые принимают комбинаторы.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Callable contracts
# ============================================================================

# Predicate = function that tests an element
type Predicate[T] = Callable[[T], bool]

# Mapper = element -> element of the same type
type Mapper[T] = Callable[[T], T]

# IndexedMapper = (index, element) -> element of the same type
type IndexedMapper[T] = Callable[[int, T], T]

# Converter = element of one type -> element of another, or a reason to skip it
# NOTE: Error(...) is not a failure of the pipeline, the element is just dropped.
type Converter[T, U, E] = Callable[[T], Result[U, E]]

# Action = side effect on an element
type Action[T] = Callable[[T], None]

__all__ = (
    "Predicate",
    "Mapper",
    "IndexedMapper",
    "Converter",
    "Action",
)
