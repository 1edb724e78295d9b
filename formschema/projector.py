"""Input Projector: rule table -> initial input descriptors."""
from __future__ import annotations

from typing import Any, Callable

from formschema.labels import create_label as default_label
from formschema.labels import generate_id as default_id
from formschema.models import CompiledRule, FieldKind, InputDescriptor, InputType, RuleTable


def render_type(name: str, rule: CompiledRule) -> tuple[InputType, Any]:
    """Rendered input type and default value for a field."""
    match rule.kind:
        case FieldKind.STRING if "password" in name.lower():
            return "password", ""
        case FieldKind.STRING:
            return "text", ""
        case FieldKind.NUMERIC:
            return "number", 0
        case FieldKind.ARRAY:
            return "array", []
    raise ValueError(f"Unhandled field kind {rule.kind!r} for '{name}'")


def project_inputs(
    rules: RuleTable,
    *,
    create_label: Callable[[str], str] = default_label,
    generate_id: Callable[[], str] = default_id,
) -> list[InputDescriptor]:
    """Build one optimistic (valid, no message) descriptor per rule, in rule order."""
    inputs = []
    for name, rule in rules.items():
        input_type, value = render_type(name, rule)
        inputs.append(InputDescriptor(
            id=generate_id(),
            name=name,
            label=create_label(name),
            type=input_type,
            value=value,
            required=rule.required,
            error_message="",
            is_valid=True,
        ))
    return inputs
