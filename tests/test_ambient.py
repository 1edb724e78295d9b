"""Tests for logging, settings and error plumbing."""

import logging

import pytest
import structlog

from formschema.config import Settings, get_settings
from formschema.errors import AppError, ErrorCode, ErrorContext, config_error, try_result
from formschema.logging import (
    LoggerRegistry,
    _censor_sensitive_keys,
    compiler_logger,
    configure_from_settings,
    configure_logging,
)


@pytest.fixture
def root_logger():
    """Root logger whose handlers and level are restored afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers, root.level = handlers, level
    structlog.reset_defaults()


def test_censor_redacts_values_and_secrets():
    event = {
        "event": "inputs_validated",
        "value": "hunter2",
        "nested": {"Password": "p4ss", "field": "age"},
        "items": [{"token": "abc"}],
    }
    redacted = _censor_sensitive_keys(None, "info", event)
    assert redacted["value"] == "[REDACTED]"
    assert redacted["nested"] == {"Password": "[REDACTED]", "field": "age"}
    assert redacted["items"] == [{"token": "[REDACTED]"}]
    assert redacted["event"] == "inputs_validated"


def test_configure_logging_sets_root_level(root_logger):
    configure_logging(level="debug", json_logs=True)
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1


@pytest.mark.parametrize("json_logs, renderer", [
    ("true", structlog.processors.JSONRenderer),
    ("false", structlog.dev.ConsoleRenderer),
])
def test_configure_from_settings(monkeypatch, root_logger, json_logs, renderer):
    monkeypatch.setenv("FORMSCHEMA_LOG_LEVEL", "warning")
    monkeypatch.setenv("FORMSCHEMA_LOG_JSON", json_logs)
    configure_from_settings()
    assert root_logger.level == logging.WARNING
    (handler,) = root_logger.handlers
    assert isinstance(handler.formatter.processors[-1], renderer)


def test_logger_registry_caches_by_component():
    assert compiler_logger() is LoggerRegistry.get("compiler")


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("FORMSCHEMA_ZERO_IS_EMPTY", "false")
    monkeypatch.setenv("FORMSCHEMA_LOG_LEVEL", "WARNING")
    settings = get_settings()
    assert settings.ZERO_IS_EMPTY is False
    assert settings.LOG_LEVEL == "WARNING"
    assert get_settings() is settings


def test_settings_defaults():
    settings = Settings()
    assert settings.REQUIRED_MESSAGE == "The input field must not be empty!"
    assert settings.PASSWORD_MIN_LENGTH == 8


def test_config_error_drops_empty_metadata():
    error = config_error("Broken", field=None, preset="min")
    assert error.code is ErrorCode.E7000_SCHEMA_GENERIC
    assert error.metadata == {"preset": "min"}
    assert error.field_name is None


def test_app_error_serialization():
    error = AppError(
        code=ErrorCode.E7002_UNKNOWN_PRESET,
        message="Validator 'zip' is not registered",
        context=ErrorContext(correlation_id="abc12345", origin="registry"),
        metadata={"field": "zip"},
    )
    body = error.to_dict()["error"]
    assert body["code"] == "E7002_UNKNOWN_PRESET"
    assert body["code_num"] == 7002
    assert body["correlation_id"] == "abc12345"
    assert error.error_id == "E7002_UNKNOWN_PRESET:abc12345"
    assert str(error) == "[E7002_UNKNOWN_PRESET] Validator 'zip' is not registered"


def test_try_result_only_captures_configuration_errors():
    assert try_result(lambda: 1).unwrap() == 1
    with pytest.raises(ZeroDivisionError):
        try_result(lambda: 1 / 0)
