"""Sequence capability, built-in adapters, and the adapter registry."""

from .adapters import ArrayAdapter, DequeAdapter, ListAdapter, MutableSequenceAdapter
from .bounded import BoundedList
from .protocol import EditableSequence, ensure_span
from .registry import (
    DEFAULT_ADAPTERS,
    AdapterRegistry,
    AdapterSpec,
    RegistryStats,
    adapt,
    default_registry,
    load_default_adapters,
    reset_default_registry,
)

__all__ = [
    "AdapterRegistry",
    "AdapterSpec",
    "ArrayAdapter",
    "BoundedList",
    "DEFAULT_ADAPTERS",
    "DequeAdapter",
    "EditableSequence",
    "ListAdapter",
    "MutableSequenceAdapter",
    "RegistryStats",
    "adapt",
    "default_registry",
    "ensure_span",
    "load_default_adapters",
    "reset_default_registry",
]
