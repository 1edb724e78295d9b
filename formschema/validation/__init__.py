"""Validator presets and registry.

Usage:
    from formschema.validation import register, predicate

    register("zip", lambda params, message: predicate(
        lambda v: isinstance(v, str) and len(v) == 5, message or "Invalid ZIP code"))
"""
from .validators import (
    CompiledValidator,
    ValidatorFactory,
    PresetValidator,
    MinValidator,
    MaxValidator,
    EmailValidator,
    PhoneValidator,
    URLValidator,
    PasswordValidator,
    PredicateValidator,
    predicate,
    custom,
    render_message,
    minimum,
    maximum,
    check_email,
    check_phone_number,
    check_url,
    check_password,
)
from .registry import (
    PresetRegistry,
    default_registry,
    register,
    list_presets,
)

__all__ = [
    "CompiledValidator",
    "ValidatorFactory",
    "PresetValidator",
    "MinValidator",
    "MaxValidator",
    "EmailValidator",
    "PhoneValidator",
    "URLValidator",
    "PasswordValidator",
    "PredicateValidator",
    "predicate",
    "custom",
    "render_message",
    "minimum",
    "maximum",
    "check_email",
    "check_phone_number",
    "check_url",
    "check_password",
    "PresetRegistry",
    "default_registry",
    "register",
    "list_presets",
]
