"""Adapters that give built-in containers the editable-sequence capability."""

from __future__ import annotations

from array import array
from collections import deque
from typing import Any, Generic, MutableSequence, Sequence, TypeVar

from editer.errors import CapacityError

from .protocol import ensure_span

T = TypeVar("T")


class MutableSequenceAdapter(Generic[T]):
    """Works with any ``MutableSequence`` through ``del`` and ``insert`` only."""

    __slots__ = ("target",)

    def __init__(self, target: MutableSequence[T]) -> None:
        self.target = target

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.target!r})"

    def length(self) -> int:
        return len(self.target)

    def get(self, index: int) -> T:
        return self.target[index]

    def set(self, index: int, value: T) -> None:
        self.target[index] = value

    def splice(self, start: int, removed_count: int, replacement: Sequence[T]) -> None:
        ensure_span(len(self.target), start, removed_count)
        for _ in range(removed_count):
            del self.target[start]
        for offset, item in enumerate(replacement):
            self.target.insert(start + offset, item)


class ListAdapter(MutableSequenceAdapter[T]):
    """For containers with slice assignment (``list``, ``bytearray``, ``UserList``)."""

    __slots__ = ()

    def splice(self, start: int, removed_count: int, replacement: Sequence[T]) -> None:
        ensure_span(len(self.target), start, removed_count)
        self.target[start : start + removed_count] = replacement  # type: ignore[index]


class ArrayAdapter(ListAdapter[Any]):
    """``array.array`` only accepts arrays of its own typecode on slice assignment."""

    __slots__ = ()

    target: array

    def splice(self, start: int, removed_count: int, replacement: Sequence[Any]) -> None:
        ensure_span(len(self.target), start, removed_count)
        self.target[start : start + removed_count] = array(
            self.target.typecode, replacement
        )


class DequeAdapter(MutableSequenceAdapter[T]):
    """Splices a ``deque`` by rotating the splice point to the left end.

    A bounded deque silently discards elements from the opposite end when it
    overflows, so splices that would exceed ``maxlen`` are rejected up front.
    """

    __slots__ = ()

    target: deque

    def splice(self, start: int, removed_count: int, replacement: Sequence[T]) -> None:
        ensure_span(len(self.target), start, removed_count)
        maxlen = self.target.maxlen
        required = len(self.target) - removed_count + len(replacement)
        if maxlen is not None and required > maxlen:
            raise CapacityError(maxlen, required)

        self.target.rotate(-start)
        for _ in range(removed_count):
            self.target.popleft()
        self.target.extendleft(reversed(replacement))
        self.target.rotate(start)


__all__ = [
    "ArrayAdapter",
    "DequeAdapter",
    "ListAdapter",
    "MutableSequenceAdapter",
]
