"""Schema: compile once, then project and validate form instances.

Usage:
    schema = Schema({
        "age": {"type": "numeric", "validators": ["required", {"min": 18}]},
        "email": {"type": "string", "validators": "email"},
    })
    inputs = schema.create_inputs()
    inputs = schema.validate([i.with_value(21) if i.name == "age" else i for i in inputs])
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from formschema.compiler import compile_rules
from formschema.config import Settings, get_settings
from formschema.errors import AppError, Result, try_result
from formschema.models import InputDescriptor, RuleTable
from formschema.projector import project_inputs
from formschema.validation import PresetRegistry, ValidatorFactory
from formschema.validator import collect_errors, is_form_valid, validate_inputs


class Schema:
    """A compiled form schema.

    Attributes:
        raw: The schema mapping as supplied
        rules: Read-only rule table, one CompiledRule per field in declared order
    """

    __slots__ = ("raw", "rules", "settings")

    def __init__(
        self,
        schema: Mapping[str, Any] | None = None,
        *,
        validators: Mapping[str, ValidatorFactory] | None = None,
        registry: PresetRegistry | None = None,
        settings: Settings | None = None,
    ):
        self.raw: Mapping[str, Any] = schema or {}
        self.settings = settings or get_settings()
        self.rules: RuleTable = compile_rules(self.raw, registry=registry, validators=validators)

    @classmethod
    def parse(
        cls,
        schema: Mapping[str, Any] | None = None,
        **kwargs: Any,
    ) -> Result[Schema, AppError]:
        """Construct without raising; configuration errors come back as Err."""
        return try_result(lambda: cls(schema, **kwargs))

    @property
    def field_names(self) -> list[str]:
        return list(self.rules)

    def create_inputs(self) -> list[InputDescriptor]:
        """Fresh descriptors for a new form instance."""
        return project_inputs(self.rules)

    def validate(self, inputs: Iterable[InputDescriptor | Mapping[str, Any]]) -> list[InputDescriptor]:
        return validate_inputs(
            self.rules,
            inputs,
            required_message=self.settings.REQUIRED_MESSAGE,
            zero_is_empty=self.settings.ZERO_IS_EMPTY,
        )

    def is_valid(self, inputs: Iterable[InputDescriptor | Mapping[str, Any]]) -> bool:
        return is_form_valid(self.validate(inputs))

    def errors(self, inputs: Iterable[InputDescriptor | Mapping[str, Any]]) -> dict[str, str]:
        return collect_errors(self.validate(inputs))

    def __repr__(self) -> str:
        return f"Schema(fields={self.field_names!r})"
