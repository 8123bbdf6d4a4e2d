"""Position handle handed to editors once per traversal step."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, TypeVar

from editer.errors import SlotExpiredError, SlotVacantError
from editer.sequence.protocol import EditableSequence

T = TypeVar("T")


class Slot(Generic[T]):
    """Reads and edits the element under the traversal cursor.

    Every edit is spliced into the sequence immediately. The slot tracks how
    many elements were inserted before the current one (``b``), the width of
    whatever now stands in its place (``r``), and how many were inserted after
    it (``a``). Layout around the cursor index ``i``::

        i          i+b              i+b+r            i+b+r+a
        | before.. | element/repl.. | after..        |

    The engine resumes at ``i + b + r``, so inserted-before and replacement
    elements count as visited while inserted-after elements are offered next.
    """

    __slots__ = ("_sequence", "_index", "_before", "_width", "_after", "_vacant", "_active")

    def __init__(self, sequence: EditableSequence[T], index: int) -> None:
        self._sequence = sequence
        self._index = index
        self._before = 0
        self._width = 1
        self._after = 0
        self._vacant = False
        self._active = True

    @property
    def index(self) -> int:
        """Cursor index this slot was bound to."""

        return self._index

    @property
    def position(self) -> int:
        """Where the current element (or its replacement) now starts."""

        return self._index + self._before

    @property
    def stride(self) -> int:
        return self._before + self._width

    @property
    def vacant(self) -> bool:
        return self._vacant

    @property
    def active(self) -> bool:
        return self._active

    @property
    def counts(self) -> tuple[int, int, int]:
        """``(before, width, after)`` recorded so far."""

        return (self._before, self._width, self._after)

    # Reading and in-place mutation

    @property
    def value(self) -> T:
        self._ensure_present()
        return self._sequence.get(self.position)

    @value.setter
    def value(self, item: T) -> None:
        self._ensure_present()
        self._sequence.set(self.position, item)

    def get(self) -> T:
        return self.value

    def set(self, item: T) -> None:
        self.value = item

    def update(self, transform: Callable[[T], T]) -> T:
        """Overwrite the element with ``transform(element)`` and return it."""

        updated = transform(self.value)
        self.value = updated
        return updated

    # Structural edits

    def insert_before(self, items: Iterable[T]) -> None:
        self._ensure_active()
        batch = tuple(items)
        if not batch:
            return
        self._sequence.splice(self.position, 0, batch)
        self._before += len(batch)

    def insert_after(self, items: Iterable[T]) -> None:
        self._ensure_active()
        batch = tuple(items)
        if not batch:
            return
        self._sequence.splice(self.position + self._width + self._after, 0, batch)
        self._after += len(batch)

    def replace(self, items: Iterable[T]) -> None:
        self._ensure_present()
        batch = tuple(items)
        self._sequence.splice(self.position, 1, batch)
        self._width = len(batch)
        self._vacant = True

    def replace_with(self, produce: Callable[[T], Iterable[T]]) -> None:
        """Replace the element with whatever ``produce(element)`` yields."""

        self.replace(produce(self.value))

    def remove(self) -> None:
        self.replace(())

    # Lifecycle

    def release(self) -> None:
        self._active = False

    def _ensure_active(self) -> None:
        if not self._active:
            raise SlotExpiredError(self._index)

    def _ensure_present(self) -> None:
        self._ensure_active()
        if self._vacant:
            raise SlotVacantError(self._index)

    # Comparison and display delegate to the current element

    @staticmethod
    def _unwrap(other: Any) -> Any:
        return other.value if isinstance(other, Slot) else other

    def __eq__(self, other: object) -> bool:
        return self.value == self._unwrap(other)

    def __ne__(self, other: object) -> bool:
        return self.value != self._unwrap(other)

    def __lt__(self, other: Any) -> bool:
        return self.value < self._unwrap(other)

    def __le__(self, other: Any) -> bool:
        return self.value <= self._unwrap(other)

    def __gt__(self, other: Any) -> bool:
        return self.value > self._unwrap(other)

    def __ge__(self, other: Any) -> bool:
        return self.value >= self._unwrap(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        if not self._active:
            return f"Slot(<released index={self._index}>)"
        if self._vacant:
            return f"Slot(<vacant index={self._index}>)"
        return f"Slot({self.value!r})"


__all__ = ["Slot"]
