"""The capability every editable sequence backend must provide."""

from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

from editer.errors import SpliceRangeError

T = TypeVar("T")


@runtime_checkable
class EditableSequence(Protocol[T]):
    """Ordered, index-addressable, resizable storage.

    All structural change goes through ``splice``. ``set`` only overwrites an
    element in place and never changes the length.
    """

    def length(self) -> int:
        """Return the current number of elements."""
        ...

    def get(self, index: int) -> T:
        """Return the element at ``index`` (``0 <= index < length()``)."""
        ...

    def set(self, index: int, value: T) -> None:
        """Overwrite the element at ``index``."""
        ...

    def splice(self, start: int, removed_count: int, replacement: Sequence[T]) -> None:
        """Replace ``removed_count`` elements at ``start`` with ``replacement``.

        Elements at or beyond ``start + removed_count`` shift by
        ``len(replacement) - removed_count``.
        """
        ...


def ensure_span(length: int, start: int, removed_count: int) -> None:
    if start < 0 or removed_count < 0 or start + removed_count > length:
        raise SpliceRangeError(start, removed_count, length)


__all__ = ["EditableSequence", "ensure_span"]
