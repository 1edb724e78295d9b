"""Preset Validator System

A compiled validator is any object exposing ``validate(value) -> bool`` and a
``message``. Presets are frozen dataclasses built once at compile time by a
factory that receives the field's parameter mapping and optional message.

Features:
- Frozen dataclass validators for immutability
- Compiled regex at module level
- Default messages with {param} placeholders
- Values of the wrong type fail the check instead of raising
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, ClassVar, Mapping, Protocol, runtime_checkable
from urllib.parse import urlparse
import re

from formschema.config import get_settings
from formschema.errors import SchemaConfigurationError, invalid_preset_params

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
PHONE_PATTERN = re.compile(r"^\+?[\d\s().-]+$")
PHONE_DIGITS = (7, 15)


@runtime_checkable
class CompiledValidator(Protocol):
    """Predicate + message pair produced by a preset or custom factory."""
    message: str

    def validate(self, value: Any) -> bool: ...


ValidatorFactory = Callable[[Mapping[str, Any], "str | None"], CompiledValidator]


class PresetValidator(ABC):
    """Base class for built-in validators."""

    @abstractmethod
    def validate(self, value: Any) -> bool:
        """Return True when value satisfies the constraint."""

    @property
    @abstractmethod
    def constraint_name(self) -> str:
        """Short constraint name for logs."""


def render_message(template: str, **values: Any) -> str:
    """Substitute {name} placeholders without touching unrelated braces."""
    for key, value in values.items():
        if isinstance(value, (str, int, float, Decimal)):
            template = template.replace(f"{{{key}}}", str(value))
    return template


def _measure(value: Any) -> float | int | Decimal | None:
    """Numbers compare by value, strings and sequences by length."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return value
    if isinstance(value, (str, list, tuple)):
        return len(value)
    return None


def _numeric_param(params: Mapping[str, Any] | None, name: str) -> int | float | Decimal:
    bound = (params or {}).get(name)
    if isinstance(bound, bool) or not isinstance(bound, (int, float, Decimal)):
        raise SchemaConfigurationError(
            invalid_preset_params(name, f"expected a numeric '{name}' parameter, got {bound!r}")
        )
    return bound


# ============================================================================
# Range Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class MinValidator(PresetValidator):
    """Lower bound on a number, or on the length of a string/sequence."""
    bound: int | float | Decimal
    message: str
    default_message: ClassVar[str] = "Must be at least {min}"

    @property
    def constraint_name(self) -> str:
        return f"min[{self.bound}]"

    def validate(self, value: Any) -> bool:
        measured = _measure(value)
        return measured is not None and measured >= self.bound


@dataclass(frozen=True, slots=True)
class MaxValidator(PresetValidator):
    """Upper bound on a number, or on the length of a string/sequence."""
    bound: int | float | Decimal
    message: str
    default_message: ClassVar[str] = "Must be at most {max}"

    @property
    def constraint_name(self) -> str:
        return f"max[{self.bound}]"

    def validate(self, value: Any) -> bool:
        measured = _measure(value)
        return measured is not None and measured <= self.bound


# ============================================================================
# Format Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class EmailValidator(PresetValidator):
    message: str
    default_message: ClassVar[str] = "Invalid email address"

    @property
    def constraint_name(self) -> str:
        return "email"

    def validate(self, value: Any) -> bool:
        return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


@dataclass(frozen=True, slots=True)
class PhoneValidator(PresetValidator):
    """Digits with optional leading '+', allowing spaces, dashes, dots and parentheses."""
    message: str
    default_message: ClassVar[str] = "Invalid phone number"

    @property
    def constraint_name(self) -> str:
        return "phone"

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str) or not PHONE_PATTERN.match(value.strip()):
            return False
        digits = sum(ch.isdigit() for ch in value)
        return PHONE_DIGITS[0] <= digits <= PHONE_DIGITS[1]


@dataclass(frozen=True, slots=True)
class URLValidator(PresetValidator):
    message: str
    allowed_schemes: frozenset[str] = frozenset({"http", "https"})
    default_message: ClassVar[str] = "Invalid URL"

    @property
    def constraint_name(self) -> str:
        return f"url[{', '.join(sorted(self.allowed_schemes))}]"

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        try:
            parsed = urlparse(value)
        except ValueError:
            return False
        if parsed.scheme not in self.allowed_schemes or not parsed.netloc:
            return False
        host = parsed.hostname or ""
        return "." in host and not host.startswith(".") and not host.endswith(".")


@dataclass(frozen=True, slots=True)
class PasswordValidator(PresetValidator):
    """Minimum length plus at least one letter and one digit."""
    min_length: int
    message: str
    default_message: ClassVar[str] = (
        "Password must be at least {length} characters and contain a letter and a digit"
    )

    @property
    def constraint_name(self) -> str:
        return f"password[{self.min_length}]"

    def validate(self, value: Any) -> bool:
        if not isinstance(value, str) or len(value) < self.min_length:
            return False
        return any(ch.isalpha() for ch in value) and any(ch.isdigit() for ch in value)


# ============================================================================
# Custom Validators
# ============================================================================

@dataclass(frozen=True, slots=True)
class PredicateValidator(PresetValidator):
    """Compiled validator wrapping a plain boolean function."""
    fn: Callable[[Any], bool]
    message: str
    name: str = "custom"

    @property
    def constraint_name(self) -> str:
        return self.name

    def validate(self, value: Any) -> bool:
        return bool(self.fn(value))


def predicate(fn: Callable[[Any], bool], message: str, name: str = "custom") -> PredicateValidator:
    return PredicateValidator(fn, message, name)


def custom(message: str, name: str | None = None) -> Callable[[Callable[[Any], bool]], ValidatorFactory]:
    """Decorator turning a boolean function into a validator factory.

    The returned factory can be placed directly in a field's validator list.
    A field-level message overrides the decorator's message; both may use
    {param} placeholders filled from the field's parameters.

    Usage:
        @custom("Must be even")
        def even(value) -> bool:
            return value % 2 == 0

        schema = {"count": {"type": "numeric", "validators": [even]}}
    """
    def decorate(fn: Callable[[Any], bool]) -> ValidatorFactory:
        def factory(params: Mapping[str, Any], field_message: str | None = None) -> PredicateValidator:
            text = render_message(field_message or message, **dict(params or {}))
            return PredicateValidator(fn, text, name or fn.__name__)
        factory.__name__ = fn.__name__
        factory.__doc__ = fn.__doc__
        return factory
    return decorate


# ============================================================================
# Preset Factories
# ============================================================================

def minimum(params: Mapping[str, Any], message: str | None = None) -> MinValidator:
    bound = _numeric_param(params, "min")
    return MinValidator(bound, render_message(message or MinValidator.default_message, min=bound))


def maximum(params: Mapping[str, Any], message: str | None = None) -> MaxValidator:
    bound = _numeric_param(params, "max")
    return MaxValidator(bound, render_message(message or MaxValidator.default_message, max=bound))


def check_email(params: Mapping[str, Any], message: str | None = None) -> EmailValidator:
    return EmailValidator(message or EmailValidator.default_message)


def check_phone_number(params: Mapping[str, Any], message: str | None = None) -> PhoneValidator:
    return PhoneValidator(message or PhoneValidator.default_message)


def check_url(params: Mapping[str, Any], message: str | None = None) -> URLValidator:
    return URLValidator(message or URLValidator.default_message)


def check_password(params: Mapping[str, Any], message: str | None = None) -> PasswordValidator:
    length = (params or {}).get("password")
    if length is None or length is True:
        length = get_settings().PASSWORD_MIN_LENGTH
    elif isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise SchemaConfigurationError(
            invalid_preset_params("password", f"expected a positive integer length, got {length!r}")
        )
    return PasswordValidator(length, render_message(message or PasswordValidator.default_message, length=length))
