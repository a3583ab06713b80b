"""
Presence rules: required, not_empty, not_empty_list.
"""

from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING

from livr.types import FieldValidator

if TYPE_CHECKING:
    from livr.core.registry import RuleRegistry


def is_empty(value: Any) -> bool:
    """Absent, null and empty-string values count as "no value"."""
    return value is None or (isinstance(value, str) and value == "")


def required(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return "REQUIRED"
        return None

    return validator


def not_empty(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if isinstance(value, str) and value == "":
            return "CANNOT_BE_EMPTY"
        return None

    return validator


def not_empty_list(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return "CANNOT_BE_EMPTY"
        if not isinstance(value, list):
            return "FORMAT_ERROR"
        if not value:
            return "CANNOT_BE_EMPTY"
        return None

    return validator
