"""Rule Compiler

Turns a raw schema (field name -> field spec mapping) into a read-only rule
table. Compilation is all-or-nothing: the first configuration error is
logged and raised as SchemaConfigurationError, and no table is returned.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import ValidationError

from formschema.descriptors import Custom, Named, Required, parse_descriptor
from formschema.errors import (
    AppError,
    ErrorCode,
    Result,
    SchemaConfigurationError,
    config_error,
    invalid_custom_validator,
    invalid_field_spec,
    missing_type,
    try_result,
    unclassified_type,
)
from formschema.logging import compiler_logger
from formschema.models import CompiledRule, FieldKind, FieldSpec, RuleTable
from formschema.validation import (
    CompiledValidator,
    PresetRegistry,
    ValidatorFactory,
    default_registry,
)

log = compiler_logger()


def compile_rules(
    schema: Mapping[str, Any] | None,
    *,
    registry: PresetRegistry | None = None,
    validators: Mapping[str, ValidatorFactory] | None = None,
) -> RuleTable:
    """Compile every field of ``schema`` into a CompiledRule.

    Args:
        schema: Mapping of field name to field spec, in declaration order
        registry: Preset registry; defaults to the built-in presets
        validators: Extra name -> factory entries for this compilation only

    Returns:
        Read-only mapping of field name to CompiledRule, in schema order

    Raises:
        SchemaConfigurationError: on the first malformed field
    """
    presets = (default_registry() if registry is None else registry).extend(validators)
    rules: dict[str, CompiledRule] = {}
    try:
        if schema is not None and not isinstance(schema, Mapping):
            raise SchemaConfigurationError(
                config_error(
                    f"Schema must be a mapping of fields, got {type(schema).__name__}",
                    code=ErrorCode.E7007_INVALID_FIELD_SPEC,
                    origin="compiler",
                )
            )
        for name, entry in (schema or {}).items():
            rules[name] = compile_field(name, entry, presets)
    except SchemaConfigurationError as exc:
        log.warning(
            "schema_rejected",
            error_code=exc.code.name,
            field=exc.error.field_name,
            reason=exc.error.message,
        )
        raise

    log.debug(
        "rules_compiled",
        fields=len(rules),
        required=sum(rule.required for rule in rules.values()),
        validators=sum(len(rule.validators) for rule in rules.values()),
    )
    return MappingProxyType(rules)


def try_compile_rules(
    schema: Mapping[str, Any] | None,
    *,
    registry: PresetRegistry | None = None,
    validators: Mapping[str, ValidatorFactory] | None = None,
) -> Result[RuleTable, AppError]:
    """Like compile_rules, but returns Err instead of raising."""
    return try_result(lambda: compile_rules(schema, registry=registry, validators=validators))


def compile_field(name: Any, entry: Any, registry: PresetRegistry) -> CompiledRule:
    """Compile one schema entry."""
    spec = _parse_spec(name, entry)

    kind = FieldKind.classify(spec.type)
    if kind is None:
        raise SchemaConfigurationError(unclassified_type(name, spec.type))

    required = False
    params: dict[str, Any] = {}
    pending: list[ValidatorFactory] = []

    for raw in spec.validator_list():
        match parse_descriptor(raw, name):
            case Required():
                required = True
            case Named(name=preset, params=payload, has_params=has_params):
                if has_params:
                    params[preset] = payload
                pending.append(registry.get_factory(preset, field=name))
            case Custom(factory=factory):
                pending.append(factory)

    # Built after the loop so every factory sees all of the field's params
    frozen_params = MappingProxyType(dict(params))
    compiled = tuple(_build(name, factory, frozen_params, spec.message) for factory in pending)

    return CompiledRule(type=spec.type, kind=kind, required=required, validators=compiled)


def _parse_spec(name: Any, entry: Any) -> FieldSpec:
    if not isinstance(name, str) or not name:
        raise SchemaConfigurationError(
            invalid_field_spec(repr(name), "field names must be non-empty strings")
        )
    if not isinstance(entry, Mapping):
        raise SchemaConfigurationError(
            invalid_field_spec(name, f"expected a mapping, got {type(entry).__name__}")
        )
    if entry.get("type") is None:
        raise SchemaConfigurationError(missing_type(name))

    try:
        return FieldSpec.model_validate(dict(entry))
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first.get("loc", ())) or "entry"
        raise SchemaConfigurationError(
            invalid_field_spec(name, f"{location}: {first.get('msg', 'invalid value')}", cause=exc)
        ) from exc


def _build(
    field: str,
    factory: ValidatorFactory,
    params: Mapping[str, Any],
    message: str | None,
) -> CompiledValidator:
    try:
        built = factory(params, message)
    except SchemaConfigurationError as exc:
        raise SchemaConfigurationError(exc.error.with_metadata(field=field)) from exc

    if not isinstance(built, CompiledValidator) or not isinstance(built.message, str):
        raise SchemaConfigurationError(invalid_custom_validator(field, built))
    return built
