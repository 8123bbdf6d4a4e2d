"""Runtime services: settings and telemetry."""

from . import telemetry
from .config import (
    EditerSettings,
    configure_settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "EditerSettings",
    "configure_settings",
    "get_settings",
    "reset_settings",
    "telemetry",
]
