"""Preset registry - factory pattern for named validators."""
from __future__ import annotations

from typing import Mapping

from formschema.errors import SchemaConfigurationError, unknown_preset

from .validators import (
    ValidatorFactory,
    check_email,
    check_password,
    check_phone_number,
    check_url,
    maximum,
    minimum,
)


class PresetRegistry:
    """Name -> factory lookup used by the rule compiler.

    Compilation only reads from a registry; ``extend`` returns a new
    registry so per-schema additions never leak into the shared default.
    """

    __slots__ = ("_factories",)

    def __init__(self, factories: Mapping[str, ValidatorFactory] | None = None):
        self._factories: dict[str, ValidatorFactory] = dict(factories or {})

    def register(self, name: str, factory: ValidatorFactory) -> None:
        """Register a preset factory under name."""
        if not name or not callable(factory):
            raise ValueError(f"Cannot register preset {name!r}: need a name and a callable factory")
        self._factories[name] = factory

    def get_factory(self, name: str, field: str | None = None) -> ValidatorFactory:
        """Get a preset factory by name."""
        if name not in self._factories:
            raise SchemaConfigurationError(unknown_preset(name, self._factories, field=field))
        return self._factories[name]

    def extend(self, factories: Mapping[str, ValidatorFactory] | None) -> PresetRegistry:
        """Return a new registry with factories layered over this one."""
        merged = PresetRegistry(self._factories)
        for name, factory in (factories or {}).items():
            merged.register(name, factory)
        return merged

    def names(self) -> list[str]:
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)


_DEFAULT = PresetRegistry()


def default_registry() -> PresetRegistry:
    return _DEFAULT


def register(name: str, factory: ValidatorFactory) -> None:
    """Register a preset on the shared default registry."""
    _DEFAULT.register(name, factory)


def list_presets() -> list[str]:
    """List all registered preset names."""
    return _DEFAULT.names()


def _auto_register() -> None:
    """Register the built-in presets on import."""
    for name, factory in (
        ("min", minimum),
        ("max", maximum),
        ("email", check_email),
        ("phone", check_phone_number),
        ("url", check_url),
        ("password", check_password),
    ):
        register(name, factory)


_auto_register()
