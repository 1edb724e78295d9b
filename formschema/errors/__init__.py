"""Error Handling for formschema

Key components:
- Result[T, E]: Ok/Err container for success/failure
- AppError: Base error type with full context
- ErrorCode: Hierarchical error code taxonomy
- SchemaConfigurationError: raised when a schema cannot be compiled
- Builder functions: Ergonomic error construction

Usage:
    from formschema.errors import SchemaConfigurationError, unknown_preset

    raise SchemaConfigurationError(unknown_preset("zip", registry.names()))
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    SchemaConfigurationError,
    try_result,
)

from .builders import (
    config_error,
    invalid_field_spec,
    missing_type,
    unclassified_type,
    unknown_preset,
    unsupported_descriptor,
    invalid_preset_params,
    invalid_custom_validator,
    unknown_field,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "SchemaConfigurationError",
    "try_result",
    "config_error",
    "invalid_field_spec",
    "missing_type",
    "unclassified_type",
    "unknown_preset",
    "unsupported_descriptor",
    "invalid_preset_params",
    "invalid_custom_validator",
    "unknown_field",
]
