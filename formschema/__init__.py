"""formschema - declarative form schemas.

Compile a schema of typed fields and validation rules once, project it into
renderable input descriptors, and re-validate submitted descriptors.
"""
from formschema.compiler import compile_rules, try_compile_rules
from formschema.descriptors import Custom, Named, Required, parse_descriptor
from formschema.errors import AppError, ErrorCode, SchemaConfigurationError
from formschema.events import FieldTypeChangeRequested, request_type_change
from formschema.labels import create_label, generate_id
from formschema.models import CompiledRule, FieldKind, FieldSpec, InputDescriptor, RuleTable
from formschema.projector import project_inputs
from formschema.schema import Schema
from formschema.validation import (
    CompiledValidator,
    PresetRegistry,
    custom,
    predicate,
    register,
)
from formschema.validator import collect_errors, is_empty, is_form_valid, validate_inputs

__version__ = "0.1.0"

__all__ = [
    "Schema",
    "compile_rules",
    "try_compile_rules",
    "project_inputs",
    "validate_inputs",
    "is_empty",
    "is_form_valid",
    "collect_errors",
    "Required",
    "Named",
    "Custom",
    "parse_descriptor",
    "AppError",
    "ErrorCode",
    "SchemaConfigurationError",
    "FieldTypeChangeRequested",
    "request_type_change",
    "create_label",
    "generate_id",
    "CompiledRule",
    "FieldKind",
    "FieldSpec",
    "InputDescriptor",
    "RuleTable",
    "CompiledValidator",
    "PresetRegistry",
    "custom",
    "predicate",
    "register",
]
