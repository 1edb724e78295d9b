"""Error Types for Schema Compilation

Result/Either types for composable error propagation, plus the error code
taxonomy used by the rule compiler. Configuration problems are raised as
SchemaConfigurationError; per-field validation failures are data and never
reach this module as exceptions.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Generic, NoReturn, TypeVar, Union, final
from uuid import uuid4

T = TypeVar("T")
E = TypeVar("E", bound="AppError")


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E7xxx: Schema configuration errors
    """
    E7000_SCHEMA_GENERIC = 7000
    E7001_MISSING_TYPE = 7001
    E7002_UNKNOWN_PRESET = 7002
    E7003_UNSUPPORTED_DESCRIPTOR = 7003
    E7004_UNCLASSIFIED_TYPE = 7004
    E7005_INVALID_PRESET_PARAMS = 7005
    E7006_INVALID_CUSTOM_VALIDATOR = 7006
    E7007_INVALID_FIELD_SPEC = 7007
    E7010_UNKNOWN_FIELD = 7010

    @property
    def category(self) -> str:
        """Human-readable error category."""
        if 7000 <= self.value < 8000:
            return "configuration"
        return "unknown"


@dataclass(frozen=True, slots=True)
class ErrorContext:
    """Immutable context for error tracing and debugging."""
    correlation_id: str = field(default_factory=lambda: str(uuid4())[:8])
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    origin: str = ""


@dataclass(frozen=True, slots=True)
class AppError:
    """Base error with full context.

    All errors carry:
    - Typed error code from taxonomy
    - Human-readable message
    - Structured metadata (field name, preset name, offending descriptor)
    - Optional cause for error chaining
    """
    code: ErrorCode
    message: str
    context: ErrorContext = field(default_factory=ErrorContext)
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    @property
    def error_id(self) -> str:
        """Unique identifier for this error instance."""
        return f"{self.code.name}:{self.context.correlation_id}"

    @property
    def field_name(self) -> str | None:
        return self.metadata.get("field")

    def with_metadata(self, **kwargs) -> AppError:
        """Create new error with additional metadata."""
        return AppError(
            code=self.code,
            message=self.message,
            context=self.context,
            metadata={**self.metadata, **kwargs},
            cause=self.cause,
        )

    def to_dict(self) -> dict:
        """Serialize error for reporting."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "correlation_id": self.context.correlation_id,
                "timestamp": self.context.timestamp.isoformat(),
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"


class SchemaConfigurationError(Exception):
    """Exception wrapper for AppError.

    Raised when a schema cannot be compiled. Fatal to the schema instance:
    no partially compiled rule table is ever returned.
    """

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code


@final
@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Success variant of Result."""
    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failure variant of Result. Wraps an AppError."""
    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        """Raises the wrapped error as SchemaConfigurationError."""
        raise SchemaConfigurationError(self.error)

    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]


def try_result(f: Callable[[], T]) -> Result[T, AppError]:
    """Execute f, converting SchemaConfigurationError into Err.

    Only configuration errors are captured; anything else is a bug and
    propagates.
    """
    try:
        return Ok(f())
    except SchemaConfigurationError as e:
        return Err(e.error)
