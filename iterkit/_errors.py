from __future__ import annotations

class CapabilityError(TypeError):
    """Sequence lacks an optional capability the operation requires."""

    operation: str
    capability: str
    sequence: str

    def __init__(self, operation: str, capability: str, sequence: str) -> None:
        self.operation = operation
        self.capability = capability
        self.sequence = sequence
        super().__init__(f"{operation}() requires {capability}, got {sequence}")

class ConstructionError(RuntimeError):
    """empty() failed to build a fresh sequence."""

    sequence: str

    def __init__(self, sequence: str) -> None:
        self.sequence = sequence
        super().__init__(f"Cannot construct empty {sequence}")

class ConsumedError(RuntimeError):
    """Iter handle used after a combinator took ownership of its sequence."""

    operation: str

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}(): sequence was already consumed by a previous combinator")

__all__ = ("CapabilityError", "ConstructionError", "ConsumedError")
