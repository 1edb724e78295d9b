"""Validator descriptors.

A raw schema lists validators as strings, one-key mappings or callables.
``parse_descriptor`` decides the shape once, at compile time, producing one
of three variants the compiler can match on:

    "required"            -> Required()
    {"required": True}    -> Required()
    "Email"               -> Named("email")
    {"min": 3}            -> Named("min", 3, has_params=True)
    my_factory            -> Custom(my_factory)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from formschema.errors import SchemaConfigurationError, unsupported_descriptor
from formschema.validation import ValidatorFactory

REQUIRED = "required"


@dataclass(frozen=True, slots=True)
class Required:
    """Marks the field as required."""


@dataclass(frozen=True, slots=True)
class Named:
    """Preset looked up by name in the registry."""
    name: str
    params: Any = None
    has_params: bool = False


@dataclass(frozen=True, slots=True)
class Custom:
    """Caller-supplied factory, bypasses the registry."""
    factory: ValidatorFactory


ValidatorDescriptor = Union[Required, Named, Custom]


def parse_descriptor(raw: Any, field: str) -> ValidatorDescriptor:
    """Classify one raw validator entry of ``field``."""
    if isinstance(raw, (Required, Named, Custom)):
        return raw
    if isinstance(raw, str):
        if not raw:
            raise SchemaConfigurationError(unsupported_descriptor(field, raw))
        # Plain names are case-insensitive
        if raw.lower() == REQUIRED:
            return Required()
        return Named(raw.lower())
    if isinstance(raw, Mapping):
        if len(raw) != 1:
            raise SchemaConfigurationError(unsupported_descriptor(field, raw))
        ((key, value),) = raw.items()
        if not isinstance(key, str) or not key:
            raise SchemaConfigurationError(unsupported_descriptor(field, raw))
        # Mapping keys are case-sensitive
        if key == REQUIRED:
            return Required()
        return Named(key, value, has_params=True)
    if callable(raw):
        return Custom(raw)
    raise SchemaConfigurationError(unsupported_descriptor(field, raw))
