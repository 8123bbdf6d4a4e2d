"""Traversal loop that lets editors mutate a sequence while walking it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

from editer.runtime import telemetry
from editer.runtime.config import get_settings
from editer.sequence.protocol import EditableSequence
from editer.sequence.registry import AdapterRegistry, adapt

from .slot import Slot

T = TypeVar("T")
E = TypeVar("E")

Editor = Callable[[Slot[T]], object]
FallibleEditor = Callable[[Slot[T]], Optional[E]]


@dataclass(slots=True)
class Iteration(Generic[T]):
    """One traversal step: bind a slot, run the editor, compute the next cursor."""

    sequence: EditableSequence[T]
    cursor: int
    slot: Slot[T] = field(init=False)

    def __post_init__(self) -> None:
        self.slot = Slot(self.sequence, self.cursor)

    def perform(self, editor: Callable[[Slot[T]], Any]) -> Any:
        try:
            return editor(self.slot)
        finally:
            self.slot.release()

    def advance(self) -> int:
        return self.cursor + self.slot.stride


@dataclass(slots=True)
class _Traversal(Generic[T]):
    sequence: EditableSequence[T]
    trace_steps: bool
    cursor: int = 0
    steps: int = 0

    def pending(self) -> bool:
        return self.cursor < self.sequence.length()

    def step(self, editor: Callable[[Slot[T]], Any]) -> tuple[Any, Iteration[T]]:
        iteration = Iteration(self.sequence, self.cursor)
        outcome = iteration.perform(editor)
        self.steps += 1
        if self.trace_steps:
            before, width, after = iteration.slot.counts
            telemetry.record_event(
                "edit::step",
                level="debug",
                data={
                    "cursor": iteration.cursor,
                    "before": before,
                    "width": width,
                    "after": after,
                },
            )
        return outcome, iteration


def _describe(target: object) -> str:
    return type(target).__qualname__


def edit(
    sequence: Any,
    editor: Editor[T],
    *,
    registry: Optional[AdapterRegistry] = None,
) -> None:
    """Walk ``sequence`` front to back, calling ``editor`` with a slot per element.

    The editor may insert before or after the element, replace it, or remove
    it through the slot. Inserted-before and replacement elements are skipped;
    inserted-after elements are visited next. The editor's return value is
    ignored.
    """

    target = adapt(sequence, registry=registry)
    traversal = _Traversal(target, trace_steps=get_settings().trace_steps)
    with telemetry.span(
        "engine::edit", component="engine", metadata={"sequence": _describe(sequence)}
    ) as handle:
        while traversal.pending():
            _, iteration = traversal.step(editor)
            traversal.cursor = iteration.advance()
        handle.add_metadata("steps", traversal.steps)
        handle.add_metadata("length", target.length())
        handle.finish()


def try_edit(
    sequence: Any,
    editor: FallibleEditor[T, E],
    *,
    registry: Optional[AdapterRegistry] = None,
) -> Optional[E]:
    """Like ``edit``, but stop at the first step whose editor returns non-``None``.

    That value is returned unchanged. Edits made through the slot before the
    editor returned stay applied, and nothing further is done to the element
    being visited. Returns ``None`` when every element was visited.
    """

    target = adapt(sequence, registry=registry)
    traversal = _Traversal(target, trace_steps=get_settings().trace_steps)
    with telemetry.span(
        "engine::try_edit",
        component="engine",
        metadata={"sequence": _describe(sequence)},
    ) as handle:
        while traversal.pending():
            failure, iteration = traversal.step(editor)
            if failure is not None:
                handle.add_metadata("aborted_at", iteration.cursor)
                telemetry.record_event(
                    "edit::aborted",
                    level="warning",
                    data={"cursor": iteration.cursor, "failure": repr(failure)},
                )
                return failure
            traversal.cursor = iteration.advance()
        handle.add_metadata("steps", traversal.steps)
        handle.add_metadata("length", target.length())
        handle.finish()
    return None


__all__ = ["Editor", "FallibleEditor", "Iteration", "edit", "try_edit"]
