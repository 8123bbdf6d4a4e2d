"""Exceptions raised by the engine, the adapters, and the registry."""

from __future__ import annotations


class EditerError(RuntimeError):
    """Base class for every error this package raises itself."""


class SlotExpiredError(EditerError):
    """Raised when a slot is used after its traversal step has ended."""

    def __init__(self, index: int) -> None:
        super().__init__(f"Slot at index {index} is no longer active")
        self.index = index


class SlotVacantError(EditerError):
    """Raised when a slot's element was already replaced or removed."""

    def __init__(self, index: int) -> None:
        super().__init__(
            f"Element at index {index} was already replaced or removed in this step"
        )
        self.index = index


class SpliceRangeError(EditerError, IndexError):
    """Raised when a splice addresses elements outside the sequence."""

    def __init__(self, start: int, removed_count: int, length: int) -> None:
        super().__init__(
            f"Cannot splice {removed_count} element(s) at {start} "
            f"in a sequence of length {length}"
        )
        self.start = start
        self.removed_count = removed_count
        self.length = length


class CapacityError(EditerError):
    """Raised when a fixed-capacity container would overflow."""

    def __init__(self, capacity: int, required: int) -> None:
        super().__init__(
            f"Operation needs room for {required} element(s) but capacity is {capacity}"
        )
        self.capacity = capacity
        self.required = required


class UnsupportedSequenceError(EditerError, TypeError):
    """Raised when no adapter is registered for a container type."""

    def __init__(self, target_type: type) -> None:
        super().__init__(
            f"No sequence adapter registered for '{target_type.__qualname__}'"
        )
        self.target_type = target_type


__all__ = [
    "CapacityError",
    "EditerError",
    "SlotExpiredError",
    "SlotVacantError",
    "SpliceRangeError",
    "UnsupportedSequenceError",
]
