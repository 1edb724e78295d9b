"""Form schema data model.

FieldSpec is the parsed shape of one raw schema entry, CompiledRule the
normalized rule the compiler produces from it, and InputDescriptor the
renderable state of one field handed to and from the presentation layer.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Literal, Mapping

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from formschema.validation import CompiledValidator

InputType = Literal["text", "password", "number", "array"]


class FieldKind(str, Enum):
    """Primitive category of a field's declared type."""
    STRING = "string"
    NUMERIC = "numeric"
    ARRAY = "array"

    @classmethod
    def classify(cls, type_name: str) -> FieldKind | None:
        """'string' and 'numeric' match exactly; any type mentioning 'array' is an array."""
        if type_name == "string":
            return cls.STRING
        if type_name == "numeric":
            return cls.NUMERIC
        if "array" in type_name.lower():
            return cls.ARRAY
        return None


class FieldSpec(BaseModel):
    """One raw schema entry: type, default message, validators."""
    model_config = ConfigDict(extra="ignore", frozen=True)

    type: str
    message: str | None = None
    validators: Any = None

    def validator_list(self) -> list[Any]:
        """Validators as an ordered list; a bare descriptor becomes a one-item list."""
        if self.validators is None:
            return []
        if isinstance(self.validators, (list, tuple)):
            return list(self.validators)
        return [self.validators]


@dataclass(frozen=True, slots=True)
class CompiledRule:
    type: str
    kind: FieldKind
    required: bool = False
    validators: tuple[CompiledValidator, ...] = ()


RuleTable = Mapping[str, CompiledRule]


class InputDescriptor(BaseModel):
    """Renderable, validatable state of one field.

    Serializes with camelCase keys (errorMessage, isValid) for the
    presentation layer and accepts either camelCase or snake_case on input.
    Frozen: every validation pass produces new descriptors.
    """
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    label: str
    type: InputType
    value: Any = None
    required: bool = False
    error_message: str = ""
    is_valid: bool = True

    def with_value(self, value: Any) -> InputDescriptor:
        """Copy carrying a newly edited value."""
        return self.model_copy(update={"value": value})

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
