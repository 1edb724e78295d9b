"""Schema Configuration Error Builders

Ergonomic constructors for the configuration errors the rule compiler
surfaces. Each builder returns an AppError; callers raise it through
SchemaConfigurationError.
"""
from typing import Any, Iterable

from .types import AppError, ErrorCode, ErrorContext


def config_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E7000_SCHEMA_GENERIC,
    field: str | None = None,
    origin: str = "",
    cause: Exception | None = None,
    **metadata,
) -> AppError:
    """Create schema configuration error."""
    meta = {"field": field, **metadata}
    return AppError(
        code=code,
        message=message,
        context=ErrorContext(origin=origin),
        metadata={k: v for k, v in meta.items() if v is not None},
        cause=cause,
    )


def invalid_field_spec(field: str, reason: str, cause: Exception | None = None) -> AppError:
    return config_error(
        f"Field '{field}' has an invalid spec: {reason}",
        code=ErrorCode.E7007_INVALID_FIELD_SPEC,
        field=field,
        origin="compiler",
        cause=cause,
    )


def missing_type(field: str) -> AppError:
    return config_error(
        f"Field '{field}' does not declare a type",
        code=ErrorCode.E7001_MISSING_TYPE,
        field=field,
        origin="compiler",
    )


def unclassified_type(field: str, type_name: str) -> AppError:
    return config_error(
        f"Field '{field}' has unsupported type '{type_name}' "
        "(expected 'string', 'numeric' or an array type)",
        code=ErrorCode.E7004_UNCLASSIFIED_TYPE,
        field=field,
        origin="compiler",
        type=type_name,
    )


def unknown_preset(name: str, available: Iterable[str], field: str | None = None) -> AppError:
    names = ", ".join(sorted(available)) or "none"
    return config_error(
        f"Validator '{name}' is not registered. Available: {names}",
        code=ErrorCode.E7002_UNKNOWN_PRESET,
        field=field,
        origin="registry",
        preset=name,
    )


def unsupported_descriptor(field: str, descriptor: Any) -> AppError:
    return config_error(
        f"Field '{field}' has an unsupported validator descriptor: {descriptor!r}",
        code=ErrorCode.E7003_UNSUPPORTED_DESCRIPTOR,
        field=field,
        origin="descriptors",
        descriptor=repr(descriptor),
    )


def invalid_preset_params(preset: str, reason: str) -> AppError:
    return config_error(
        f"Validator '{preset}' is misconfigured: {reason}",
        code=ErrorCode.E7005_INVALID_PRESET_PARAMS,
        origin="presets",
        preset=preset,
    )


def invalid_custom_validator(field: str, produced: Any) -> AppError:
    return config_error(
        f"Custom validator for field '{field}' must produce an object with "
        f"'validate' and 'message', got {type(produced).__name__}",
        code=ErrorCode.E7006_INVALID_CUSTOM_VALIDATOR,
        field=field,
        origin="compiler",
    )


def unknown_field(field: str) -> AppError:
    return config_error(
        f"No rule compiled for field '{field}'",
        code=ErrorCode.E7010_UNKNOWN_FIELD,
        field=field,
        origin="validator",
    )
