"""Tests for built-in validator presets and the preset registry."""

from decimal import Decimal

import pytest

from formschema.errors import ErrorCode, SchemaConfigurationError
from formschema.validation import (
    CompiledValidator,
    PresetRegistry,
    check_email,
    check_password,
    check_phone_number,
    check_url,
    custom,
    list_presets,
    maximum,
    minimum,
    render_message,
)


class TestRangePresets:
    def test_min_on_numbers(self):
        validator = minimum({"min": 18})
        assert validator.validate(18)
        assert validator.validate(21.5)
        assert validator.validate(Decimal("19"))
        assert not validator.validate(16)

    def test_min_on_strings_and_lists_uses_length(self):
        validator = minimum({"min": 3})
        assert validator.validate("Ada")
        assert not validator.validate("Al")
        assert validator.validate(["a", "b", "c"])

    def test_max(self):
        validator = maximum({"min": 1, "max": 5})
        assert validator.validate(5)
        assert not validator.validate(6)
        assert not validator.validate("too long")
        assert validator.message == "Must be at most 5"

    @pytest.mark.parametrize("value", [True, None, object()])
    def test_unmeasurable_values_fail(self, value):
        assert not minimum({"min": 0}).validate(value)

    def test_missing_bound_is_configuration_error(self):
        with pytest.raises(SchemaConfigurationError) as exc_info:
            minimum({})
        assert exc_info.value.code is ErrorCode.E7005_INVALID_PRESET_PARAMS

    def test_boolean_bound_is_rejected(self):
        with pytest.raises(SchemaConfigurationError):
            maximum({"max": True})


class TestFormatPresets:
    @pytest.mark.parametrize("value, expected", [
        ("ada@example.com", True),
        ("ada.lovelace+forms@mail.example.org", True),
        ("ada@", False),
        ("not an email", False),
        (42, False),
    ])
    def test_email(self, value, expected):
        assert check_email({}).validate(value) is expected

    @pytest.mark.parametrize("value, expected", [
        ("+1 (555) 123-4567", True),
        ("555.123.4567", True),
        ("12345", False),
        ("555-abc-1234", False),
        ("+1234567890123456", False),
        (5551234567, False),
    ])
    def test_phone(self, value, expected):
        assert check_phone_number({}).validate(value) is expected

    @pytest.mark.parametrize("value, expected", [
        ("https://example.com", True),
        ("http://docs.example.com:8080/path?q=1", True),
        ("ftp://example.com", False),
        ("https://localhost", False),
        ("bad-url", False),
        ("ok", False),
        (None, False),
    ])
    def test_url(self, value, expected):
        assert check_url({}).validate(value) is expected

    def test_password_defaults(self):
        validator = check_password({})
        assert validator.validate("abc12345")
        assert not validator.validate("abcdefgh")
        assert not validator.validate("12345678")
        assert not validator.validate("a1")
        assert validator.message == (
            "Password must be at least 8 characters and contain a letter and a digit"
        )

    def test_password_length_param(self):
        validator = check_password({"password": 4})
        assert validator.validate("ab12")
        assert "4 characters" in validator.message

    def test_password_length_from_settings(self, monkeypatch):
        monkeypatch.setenv("FORMSCHEMA_PASSWORD_MIN_LENGTH", "12")
        validator = check_password({})
        assert not validator.validate("abc123456")
        assert validator.validate("abc123456789")

    def test_invalid_password_length(self):
        with pytest.raises(SchemaConfigurationError):
            check_password({"password": "long"})

    def test_default_messages_can_be_overridden(self):
        assert check_email({}, "Bad email").message == "Bad email"
        assert check_url({}, "Bad link").message == "Bad link"


class TestCustom:
    def test_custom_decorator_builds_factory(self):
        @custom("Must be divisible by {step}")
        def divisible(value):
            return value % 5 == 0

        validator = divisible({"step": 5}, None)
        assert isinstance(validator, CompiledValidator)
        assert validator.message == "Must be divisible by 5"
        assert validator.constraint_name == "divisible"
        assert validator.validate(10)
        assert not validator.validate(7)

    def test_field_message_wins(self):
        @custom("default")
        def anything(value):
            return True

        assert anything({}, "from field").message == "from field"

    def test_render_message_leaves_unknown_placeholders(self):
        assert render_message("{min} to {max} ({unit})", min=1, max=3) == "1 to 3 ({unit})"


class TestPresetRegistry:
    def test_builtin_presets(self):
        assert set(list_presets()) >= {"min", "max", "email", "phone", "url", "password"}

    def test_unknown_name_lists_available(self):
        registry = PresetRegistry({"email": check_email})
        with pytest.raises(SchemaConfigurationError) as exc_info:
            registry.get_factory("zip", field="postcode")
        assert exc_info.value.code is ErrorCode.E7002_UNKNOWN_PRESET
        assert "email" in exc_info.value.error.message
        assert exc_info.value.error.field_name == "postcode"

    def test_extend_returns_new_registry(self):
        base = PresetRegistry({"email": check_email})
        extended = base.extend({"url": check_url})
        assert "url" in extended
        assert "url" not in base
        assert len(extended) == 2

    def test_register_rejects_non_callables(self):
        with pytest.raises(ValueError):
            PresetRegistry().register("zip", "not callable")
