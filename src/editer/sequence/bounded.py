"""Fixed-capacity list that implements the editable-sequence capability itself."""

from __future__ import annotations

from typing import Any, Iterable, List, MutableSequence, Sequence, TypeVar, overload

from editer.errors import CapacityError

from .protocol import ensure_span

T = TypeVar("T")


class BoundedList(MutableSequence[T]):
    """A list that never grows past ``capacity``.

    Every operation that would overflow raises ``CapacityError`` and leaves the
    list untouched.
    """

    __slots__ = ("_items", "_capacity")

    def __init__(self, capacity: int, items: Iterable[T] = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        initial = list(items)
        if len(initial) > capacity:
            raise CapacityError(capacity, len(initial))
        self._capacity = capacity
        self._items: List[T] = initial

    @classmethod
    def full(cls, items: Iterable[T]) -> "BoundedList[T]":
        """Build a list whose capacity equals its initial length."""

        initial = list(items)
        return cls(len(initial), initial)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def remaining_capacity(self) -> int:
        return self._capacity - len(self._items)

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def _ensure_room(self, required: int) -> None:
        if required > self._capacity:
            raise CapacityError(self._capacity, required)

    # MutableSequence

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, slice):
            values = list(value)
            start, stop, step = index.indices(len(self._items))
            if step == 1:
                removed = max(stop - start, 0)
                self._ensure_room(len(self._items) - removed + len(values))
            self._items[index] = values
        else:
            self._items[index] = value

    def __delitem__(self, index: Any) -> None:
        del self._items[index]

    def insert(self, index: int, value: T) -> None:
        self._ensure_room(len(self._items) + 1)
        self._items.insert(index, value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoundedList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoundedList({self._capacity}, {self._items!r})"

    # EditableSequence

    def length(self) -> int:
        return len(self._items)

    def get(self, index: int) -> T:
        return self._items[index]

    def set(self, index: int, value: T) -> None:
        self._items[index] = value

    def splice(self, start: int, removed_count: int, replacement: Sequence[T]) -> None:
        ensure_span(len(self._items), start, removed_count)
        self._ensure_room(len(self._items) - removed_count + len(replacement))
        self._items[start : start + removed_count] = replacement


__all__ = ["BoundedList"]
