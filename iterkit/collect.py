from __future__ import annotations

import typing

from ._helpers import require
from .protocol import Materializable

def collect(source: object) -> typing.Any:
    """
    Backing collection of a Materializable sequence, by reference.

    Consumes nothing: whatever produced source already drained its inputs.
    """
    materializable: Materializable[typing.Any] = require(source, Materializable, operation="collect")
    return materializable.to_native()

__all__ = ("collect",)
