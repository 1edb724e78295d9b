"""Validator: re-check submitted input descriptors against compiled rules.

Per descriptor, the first matching rule wins:

1. required and empty              -> invalid, fixed "must not be empty" message
2. empty and optional              -> valid
3. optional array with no items    -> valid
4. run the field's validators in order; a list value is checked item by
   item. The first failing validator decides the message. Each passing
   validator resets the result to valid, so a field whose validators all
   pass (or that has none) ends up valid.

Validation failures are returned as data on new descriptor objects; the
input list and its descriptors are never modified.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Iterable, Mapping

from formschema.config import get_settings
from formschema.errors import SchemaConfigurationError, unknown_field
from formschema.logging import validator_logger
from formschema.models import InputDescriptor, RuleTable
from formschema.validation import CompiledValidator

log = validator_logger()


def is_empty(value: Any, *, zero_is_empty: bool = True) -> bool:
    """Whether a submitted value counts as 'not filled in'."""
    if value is None or value is False:
        return True
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    if isinstance(value, (int, float, Decimal)):
        return zero_is_empty and value == 0
    return False


def validate_inputs(
    rules: RuleTable,
    inputs: Iterable[InputDescriptor | Mapping[str, Any]],
    *,
    required_message: str | None = None,
    zero_is_empty: bool | None = None,
) -> list[InputDescriptor]:
    """Validate a snapshot of descriptors, returning a new snapshot in the same order.

    Args:
        rules: Compiled rule table the descriptors were projected from
        inputs: Descriptors, or their camelCase/snake_case dict form
        required_message: Message for required-but-empty fields (settings default)
        zero_is_empty: Treat numeric 0 as empty (settings default)

    Raises:
        SchemaConfigurationError: a descriptor names a field with no rule
    """
    settings = get_settings()
    if required_message is None:
        required_message = settings.REQUIRED_MESSAGE
    if zero_is_empty is None:
        zero_is_empty = settings.ZERO_IS_EMPTY

    validated = [
        validate_input(
            rules,
            _as_descriptor(item),
            required_message=required_message,
            zero_is_empty=zero_is_empty,
        )
        for item in inputs
    ]

    invalid = [d.name for d in validated if not d.is_valid]
    log.debug("inputs_validated", fields=len(validated), invalid=len(invalid), invalid_fields=invalid)
    return validated


def validate_input(
    rules: RuleTable,
    descriptor: InputDescriptor,
    *,
    required_message: str,
    zero_is_empty: bool = True,
) -> InputDescriptor:
    rule = rules.get(descriptor.name)
    if rule is None:
        raise SchemaConfigurationError(unknown_field(descriptor.name))

    value = descriptor.value
    empty = is_empty(value, zero_is_empty=zero_is_empty)

    if descriptor.required and empty:
        return _mark(descriptor, False, required_message)
    if empty:
        return _mark(descriptor, True)
    if descriptor.type == "array" and _is_sequence(value) and not value and not descriptor.required:
        return _mark(descriptor, True)

    result = _mark(descriptor, True)
    for validator in rule.validators:
        if not _passes(validator, value):
            log.debug(
                "field_rejected",
                field=descriptor.name,
                constraint=getattr(validator, "constraint_name", type(validator).__name__),
            )
            return _mark(descriptor, False, validator.message)
        result = _mark(descriptor, True)
    return result


def is_form_valid(inputs: Iterable[InputDescriptor]) -> bool:
    return all(d.is_valid for d in inputs)


def collect_errors(inputs: Iterable[InputDescriptor]) -> dict[str, str]:
    """Field name -> error message for every invalid descriptor."""
    return {d.name: d.error_message for d in inputs if not d.is_valid}


def _passes(validator: CompiledValidator, value: Any) -> bool:
    if _is_sequence(value):
        # all() stops at the first failing item
        return all(validator.validate(item) for item in value)
    return bool(validator.validate(value))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _mark(descriptor: InputDescriptor, is_valid: bool, message: str = "") -> InputDescriptor:
    return descriptor.model_copy(update={"is_valid": is_valid, "error_message": message})


def _as_descriptor(item: InputDescriptor | Mapping[str, Any]) -> InputDescriptor:
    if isinstance(item, InputDescriptor):
        return item
    if isinstance(item, Mapping):
        return InputDescriptor.model_validate(dict(item))
    raise TypeError(f"Expected InputDescriptor or mapping, got {type(item).__name__}")
