"""
Shared type definitions for the LIVR engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Mapping, Optional, Union


# Marker reported instead of a field map when the input is not a mapping
FORMAT_ERROR = "FORMAT_ERROR"

LogLevel = Literal["debug", "info", "warn", "error", "silent"]


class _Unset:
    """Sentinel meaning "the rule wrote no replacement value"."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET = _Unset()

# A field error is an opaque code; meta rules may nest maps or lists of codes
ErrorCode = Union[str, dict[str, Any], list[Any]]

# (value, record) -> falsy | error | (error, replacement)
FieldValidator = Callable[[Any, Mapping[str, Any]], Any]

# (*args, registry) -> FieldValidator
RuleBuilder = Callable[..., FieldValidator]

Pipeline = tuple[FieldValidator, ...]


def passed(value: Any = UNSET) -> tuple[str, Any]:
    """Success, optionally replacing the field value."""
    return "", value


def failed(code: ErrorCode) -> tuple[ErrorCode, Any]:
    return code, UNSET


@dataclass
class ValidationOutcome:
    """Result of running compiled pipelines against one input record."""

    output: Optional[dict[str, Any]] = None
    errors: Optional[Union[dict[str, ErrorCode], str]] = None

    @property
    def ok(self) -> bool:
        return self.errors is None


@dataclass
class ValidatorOptions:
    """Options for creating a Validator instance."""

    # Strip surrounding whitespace from string input values before validation
    auto_trim: bool = False
    # Compile pipelines at construction instead of on first validate()
    prepare: bool = False
    # Log level for engine operations (falls back to LIVR_LOG_LEVEL)
    log_level: Optional[LogLevel] = None
