"""Environment-driven settings shared by the engine and the adapter registry."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Mapping, Optional

ENV_PREFIX = "EDITER_"

_TRUTHY = {"1", "true", "yes", "on"}

_ACTIVE_SETTINGS: Optional["EditerSettings"] = None


def env(
    name: str,
    default: Optional[str] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Optional[str]:
    source = os.environ if environ is None else environ
    return source.get(f"{ENV_PREFIX}{name}", default)


def env_flag(
    name: str, default: bool, *, environ: Optional[Mapping[str, str]] = None
) -> bool:
    raw = env(name, environ=environ)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def _parse_names(raw: Optional[str]) -> Optional[tuple[str, ...]]:
    if raw is None:
        return None
    names = tuple(part.strip().lower() for part in raw.split(",") if part.strip())
    return tuple(dict.fromkeys(names))


@dataclass(frozen=True, slots=True)
class EditerSettings:
    """Runtime knobs for a process.

    ``adapters`` restricts which built-in adapters the default registry loads;
    ``None`` loads all of them.
    """

    adapters: Optional[tuple[str, ...]] = None
    trace_steps: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "EditerSettings":
        return cls(
            adapters=_parse_names(env("ADAPTERS", environ=environ)),
            trace_steps=env_flag("TRACE_STEPS", False, environ=environ),
        )

    def allows_adapter(self, name: str) -> bool:
        return self.adapters is None or name.lower() in self.adapters


def get_settings() -> EditerSettings:
    global _ACTIVE_SETTINGS
    if _ACTIVE_SETTINGS is None:
        _ACTIVE_SETTINGS = EditerSettings.from_env()
    return _ACTIVE_SETTINGS


def configure_settings(
    settings: Optional[EditerSettings] = None, **overrides: object
) -> EditerSettings:
    """Adopt new settings, optionally patching individual fields.

    The default adapter registry is rebuilt lazily on next use so adapter
    selection changes take effect immediately.
    """

    global _ACTIVE_SETTINGS
    base = settings or get_settings()
    if "adapters" in overrides and overrides["adapters"] is not None:
        overrides["adapters"] = tuple(
            str(name).lower() for name in overrides["adapters"]  # type: ignore[union-attr]
        )
    _ACTIVE_SETTINGS = replace(base, **overrides) if overrides else base

    from editer.sequence.registry import reset_default_registry

    reset_default_registry()
    return _ACTIVE_SETTINGS


def reset_settings() -> None:
    global _ACTIVE_SETTINGS
    _ACTIVE_SETTINGS = None

    from editer.sequence.registry import reset_default_registry

    reset_default_registry()


__all__ = [
    "ENV_PREFIX",
    "EditerSettings",
    "configure_settings",
    "env",
    "env_flag",
    "get_settings",
    "reset_settings",
]
