"""Registry mapping container types to the adapters that make them editable."""

from __future__ import annotations

from array import array
from collections import UserList, deque
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Sequence

from editer.errors import UnsupportedSequenceError
from editer.runtime.config import get_settings
from editer.runtime.telemetry import span

from .adapters import ArrayAdapter, DequeAdapter, ListAdapter, MutableSequenceAdapter
from .protocol import EditableSequence

AdapterFactory = Callable[[Any], EditableSequence[Any]]


@dataclass(frozen=True, slots=True)
class AdapterSpec:
    """Binds a container type to the factory that wraps it."""

    name: str
    kind: type
    factory: AdapterFactory
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name cannot be empty")
        object.__setattr__(self, "name", self.name.lower())


@dataclass(slots=True)
class RegistryStats:
    adapter_count: int
    names: tuple[str, ...]


class AdapterRegistry:
    """Owns adapter specs and resolves containers to editable sequences."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._specs: Dict[str, AdapterSpec] = {}
        self._logger_name = logger_name

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._specs

    def get(self, name: str) -> AdapterSpec:
        try:
            return self._specs[name.lower()]
        except KeyError as exc:
            raise KeyError(f"Adapter '{name}' is not registered") from exc

    def register(self, spec: AdapterSpec, *, replace: bool = False) -> AdapterSpec:
        with span(
            "registry::register",
            logger_name=self._logger_name,
            component="registry",
            metadata={"adapter": spec.name, "kind": spec.kind.__qualname__},
        ):
            if not replace and spec.name in self._specs:
                raise ValueError(f"Adapter '{spec.name}' already registered")
            self._specs[spec.name] = spec
            return spec

    def unregister(self, name: str) -> Optional[AdapterSpec]:
        with span(
            "registry::unregister",
            logger_name=self._logger_name,
            component="registry",
            metadata={"adapter": name},
        ):
            return self._specs.pop(name.lower(), None)

    def iter_specs(self) -> Iterator[AdapterSpec]:
        yield from self._specs.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            adapter_count=len(self._specs), names=tuple(self._specs)
        )

    def find(self, target: object) -> Optional[AdapterSpec]:
        by_kind = {spec.kind: spec for spec in reversed(self._specs.values())}
        for kind in type(target).__mro__:
            if kind in by_kind:
                return by_kind[kind]
        for spec in self._specs.values():
            if isinstance(target, spec.kind):
                return spec
        return None

    def resolve(self, target: object) -> EditableSequence[Any]:
        spec = self.find(target)
        if spec is None:
            raise UnsupportedSequenceError(type(target))
        return spec.factory(target)


DEFAULT_ADAPTERS: tuple[AdapterSpec, ...] = (
    AdapterSpec(
        name="list",
        kind=list,
        factory=ListAdapter,
        description="Growable array via slice assignment",
    ),
    AdapterSpec(
        name="bytearray",
        kind=bytearray,
        factory=ListAdapter,
        description="Mutable bytes via slice assignment",
    ),
    AdapterSpec(
        name="userlist",
        kind=UserList,
        factory=ListAdapter,
        description="collections.UserList via slice assignment",
    ),
    AdapterSpec(
        name="array",
        kind=array,
        factory=ArrayAdapter,
        description="Typed array.array",
    ),
    AdapterSpec(
        name="deque",
        kind=deque,
        factory=DequeAdapter,
        description="Double-ended queue, honouring maxlen",
    ),
    AdapterSpec(
        name="mutable_sequence",
        kind=MutableSequence,
        factory=MutableSequenceAdapter,
        description="Any MutableSequence through del/insert",
    ),
)


def load_default_adapters(
    registry: AdapterRegistry,
    *,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    replace: bool = False,
) -> AdapterRegistry:
    """Register the built-in adapters, optionally filtered by name."""

    include_set = {name.lower() for name in include} if include is not None else None
    exclude_set = {name.lower() for name in exclude or ()}

    for spec in DEFAULT_ADAPTERS:
        if include_set is not None and spec.name not in include_set:
            continue
        if spec.name in exclude_set:
            continue
        registry.register(spec, replace=replace)
    return registry


_DEFAULT_REGISTRY: Optional[AdapterRegistry] = None


def default_registry() -> AdapterRegistry:
    """Process-wide registry seeded from the active settings."""

    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        settings = get_settings()
        registry = AdapterRegistry()
        load_default_adapters(
            registry,
            include=[
                spec.name
                for spec in DEFAULT_ADAPTERS
                if settings.allows_adapter(spec.name)
            ],
        )
        _DEFAULT_REGISTRY = registry
    return _DEFAULT_REGISTRY


def reset_default_registry() -> None:
    global _DEFAULT_REGISTRY
    _DEFAULT_REGISTRY = None


def adapt(
    target: object, *, registry: Optional[AdapterRegistry] = None
) -> EditableSequence[Any]:
    """Return ``target`` as an editable sequence.

    Objects that already provide the capability are returned unchanged.
    """

    if isinstance(target, EditableSequence):
        return target
    if registry is None:
        registry = default_registry()
    return registry.resolve(target)


__all__ = [
    "AdapterFactory",
    "AdapterRegistry",
    "AdapterSpec",
    "DEFAULT_ADAPTERS",
    "RegistryStats",
    "adapt",
    "default_registry",
    "load_default_adapters",
    "reset_default_registry",
]
