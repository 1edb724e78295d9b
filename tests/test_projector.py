"""Tests for input projection, labels and identifiers."""

import itertools

import pytest

from formschema.compiler import compile_rules
from formschema.events import FieldTypeChangeRequested, request_type_change
from formschema.labels import create_label, generate_id
from formschema.projector import project_inputs


@pytest.fixture
def rules(signup_schema):
    return compile_rules(signup_schema)


def test_one_descriptor_per_rule_in_schema_order(rules):
    inputs = project_inputs(rules)
    assert [d.name for d in inputs] == list(rules)


def test_initial_state_is_optimistic(rules):
    for descriptor in project_inputs(rules):
        assert descriptor.is_valid is True
        assert descriptor.error_message == ""


def test_rendered_types_and_defaults(rules):
    by_name = {d.name: d for d in project_inputs(rules)}
    assert (by_name["username"].type, by_name["username"].value) == ("text", "")
    assert (by_name["password"].type, by_name["password"].value) == ("password", "")
    assert (by_name["age"].type, by_name["age"].value) == ("number", 0)
    assert (by_name["websites"].type, by_name["websites"].value) == ("array", [])


def test_required_is_copied_from_rule(rules):
    by_name = {d.name: d for d in project_inputs(rules)}
    assert by_name["age"].required is True
    assert by_name["email"].required is False


@pytest.mark.parametrize("name, expected", [
    ("password", "password"),
    ("confirmPassword", "password"),
    ("OLD_PASSWORD", "password"),
    ("passport", "text"),
])
def test_password_inferred_from_name(name, expected):
    rules = compile_rules({name: {"type": "string"}})
    assert project_inputs(rules)[0].type == expected


def test_password_inference_only_for_strings():
    rules = compile_rules({"passwordAttempts": {"type": "numeric"}})
    assert project_inputs(rules)[0].type == "number"


def test_array_defaults_are_not_shared():
    rules = compile_rules({"tags": {"type": "array"}})
    first, second = project_inputs(rules)[0], project_inputs(rules)[0]
    assert first.value == [] and first.value is not second.value


def test_ids_are_unique_and_not_field_names(rules):
    first = project_inputs(rules)
    second = project_inputs(rules)
    ids = [d.id for d in first + second]
    assert len(set(ids)) == len(ids)
    assert not set(ids) & set(rules)


def test_collaborators_can_be_injected(rules):
    counter = itertools.count(1)
    inputs = project_inputs(
        rules,
        create_label=str.upper,
        generate_id=lambda: f"field-{next(counter)}",
    )
    assert inputs[0].label == "USERNAME"
    assert [d.id for d in inputs] == [f"field-{i}" for i in range(1, len(rules) + 1)]


def test_descriptor_serializes_with_camel_case_keys(rules):
    payload = project_inputs(rules)[0].to_dict()
    assert set(payload) == {"id", "name", "label", "type", "value", "required", "errorMessage", "isValid"}


def test_type_change_event_carries_descriptor_id(rules):
    descriptor = project_inputs(rules)[0]
    assert request_type_change(descriptor) == FieldTypeChangeRequested(field_id=descriptor.id)


@pytest.mark.parametrize("name, label", [
    ("age", "Age"),
    ("firstName", "First name"),
    ("first_name", "First name"),
    ("home-page url", "Home page url"),
    ("userID2", "User id2"),
    ("URLField", "Url field"),
    ("parseHTTPResponse", "Parse http response"),
])
def test_create_label(name, label):
    assert create_label(name) == label


def test_generate_id_is_unique():
    assert generate_id() != generate_id()
