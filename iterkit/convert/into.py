"""
Type-changing conversion
========================

into: drain self into a caller-supplied target of another element type.
from_: drain another sequence into (a sibling of) self.

A converter returns Result: Ok(value) is appended, Error(reason) drops the
element. Failed conversions act as a filter, never as a pipeline error.
"""

from __future__ import annotations

import logging
from typing import assert_never

from kungfu import Error, Ok

from .._helpers import construct, iterate
from .._types import Converter
from ..protocol import Resettable, Seq

logger = logging.getLogger(__name__)

def _convert_all[T, U, E](source: Seq[T], target: Seq[U], convert: Converter[T, U, E]) -> None:
    for item in iterate(source):
        match convert(item):
            case Ok(value):
                target.append(value)
            case Error(reason):
                logger.debug("Conversion skipped %r: %r", item, reason)
            case _ as unreachable:
                assert_never(unreachable)

def into[T, U, E](source: Seq[T], target: Seq[U], convert: Converter[T, U, E]) -> Seq[U]:
    """
    Convert every element of source and append the successes to target.

    target is cleared first when it is Resettable; otherwise it is assumed
    to be ready and results are appended after whatever it holds.
    """
    if isinstance(target, Resettable):
        target.clear()
    _convert_all(source, target, convert)
    return target

def from_[T, U, E](other: Seq[U], this: Seq[T], convert: Converter[U, T, E]) -> Seq[T]:
    """
    Convert every element of other into this sequence's element type.

    A Resettable this is cleared and reused as the destination, otherwise a
    fresh sibling is built with empty().
    """
    if isinstance(this, Resettable):
        logger.debug("from_: reusing %s as destination", type(this).__name__)
        this.clear()
        target = this
    else:
        logger.debug("from_: %s is not resettable, constructing destination", type(this).__name__)
        target = construct(this)
    _convert_all(other, target, convert)
    return target

__all__ = ("into", "from_")
