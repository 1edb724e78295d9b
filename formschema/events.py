"""Events a presentation layer emits about rendered inputs.

The library holds no modal or selection state; a renderer that offers a
"change type" action publishes this event to whatever channel owns that
state, identifying the field by its descriptor id.
"""
from dataclasses import dataclass

from formschema.models import InputDescriptor


@dataclass(frozen=True, slots=True)
class FieldTypeChangeRequested:
    field_id: str


def request_type_change(descriptor: InputDescriptor) -> FieldTypeChangeRequested:
    return FieldTypeChangeRequested(field_id=descriptor.id)
