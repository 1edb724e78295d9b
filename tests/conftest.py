"""Shared fixtures for formschema tests."""

import pytest

from formschema.config import get_settings
from formschema.validation import predicate


@pytest.fixture(autouse=True)
def fresh_settings():
    """Settings are cached; clear around each test so env overrides don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def signup_schema():
    """A schema exercising every field kind and descriptor shape."""
    return {
        "username": {"type": "string", "validators": ["required", {"min": 3}, {"max": 12}]},
        "email": {"type": "string", "validators": "email"},
        "password": {"type": "string", "validators": ["Required", "password"]},
        "age": {"type": "numeric", "validators": ["required", {"min": 18}]},
        "websites": {"type": "array", "validators": ["url"]},
    }


@pytest.fixture
def call_log():
    return []


@pytest.fixture
def recording_factory(call_log):
    """Custom factory whose validator records every value it sees and rejects 'bad'."""
    def factory(params, message):
        def check(value):
            call_log.append(value)
            return value != "bad"
        return predicate(check, message or "Value is bad", name="not_bad")
    return factory
