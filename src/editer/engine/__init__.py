"""Traversal engine and the per-step slot handle."""

from .iteration import Editor, FallibleEditor, Iteration, edit, try_edit
from .slot import Slot

__all__ = [
    "Editor",
    "FallibleEditor",
    "Iteration",
    "Slot",
    "edit",
    "try_edit",
]
