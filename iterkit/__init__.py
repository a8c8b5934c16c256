"""
iterkit - capability-based sequence adapters.

A uniform way to traverse, transform and recombine ordered collections
without committing to one container type.

Architecture:
- protocol: Seq (required) plus optional capabilities Enumerable,
  Rewindable, Resettable, Materializable
- engine: eager combinators written purely against the protocol
  (transform, combine, convert, traverse, search, collect)
- Iter: fluent facade owning one sequence, each producing call returns a new Iter
- Strings / Pairs: reference list-backed containers

Everything is eager and single-owner: a combinator drains its inputs before
returning, and a sequence must not be driven from several threads.
"""

# Core types
from ._types import Action, Converter, IndexedMapper, Mapper, Predicate

# Internal helpers (for custom combinators)
from . import _helpers

# Capability protocol
from .protocol import Enumerable, Materializable, Resettable, Rewindable, Seq

# Values and reference containers
from .pair import Pair
from .containers import ListSeq, Pairs, Strings

# Adapter engine
from .transform import every, filter_, map_, or_
from .combine import chain, zip_
from .convert import from_, into
from .traverse import advance_by, count, each, nth
from .search import Indexed, first, last
from .collect import collect

# Facade
from .facade import Iter, strings

# Errors
from ._errors import CapabilityError, ConstructionError, ConsumedError

__all__ = (
    # Types
    "Action",
    "Converter",
    "IndexedMapper",
    "Mapper",
    "Predicate",
    # Internal helpers (for custom combinators)
    "_helpers",
    # Protocol
    "Seq",
    "Enumerable",
    "Rewindable",
    "Resettable",
    "Materializable",
    # Values
    "Pair",
    "Indexed",
    # Containers
    "ListSeq",
    "Strings",
    "Pairs",
    # Engine - transform
    "filter_",
    "map_",
    "every",
    "or_",
    # Engine - combine
    "chain",
    "zip_",
    # Engine - convert
    "into",
    "from_",
    # Engine - traverse
    "each",
    "count",
    "advance_by",
    "nth",
    # Engine - search
    "first",
    "last",
    # Engine - collect
    "collect",
    # Facade
    "Iter",
    "strings",
    # Errors
    "CapabilityError",
    "ConstructionError",
    "ConsumedError",
)
