"""In-place, simultaneous iteration and mutation of sequences."""

from .engine import Slot, edit, try_edit
from .errors import (
    CapacityError,
    EditerError,
    SlotExpiredError,
    SlotVacantError,
    SpliceRangeError,
    UnsupportedSequenceError,
)
from .runtime import EditerSettings, configure_settings, get_settings
from .sequence import (
    AdapterRegistry,
    AdapterSpec,
    BoundedList,
    EditableSequence,
    adapt,
    load_default_adapters,
)

__all__ = [
    "AdapterRegistry",
    "AdapterSpec",
    "BoundedList",
    "CapacityError",
    "EditableSequence",
    "EditerError",
    "EditerSettings",
    "SlotExpiredError",
    "SlotVacantError",
    "Slot",
    "SpliceRangeError",
    "UnsupportedSequenceError",
    "adapt",
    "configure_settings",
    "edit",
    "get_settings",
    "load_default_adapters",
    "try_edit",
]

__version__ = "0.2.0"
