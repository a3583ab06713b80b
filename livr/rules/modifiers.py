"""
Modifiers: rules that never fail and rewrite the value instead.
"""

from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING

from livr.rules.common import is_empty
from livr.types import FieldValidator, passed

if TYPE_CHECKING:
    from livr.core.registry import RuleRegistry


def trim(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if isinstance(value, str):
            return passed(value.strip())
        return None

    return validator


def to_lc(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if isinstance(value, str):
            return passed(value.lower())
        return None

    return validator


def to_uc(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if isinstance(value, str):
            return passed(value.upper())
        return None

    return validator


def default(default_value: Any, registry: "RuleRegistry") -> FieldValidator:
    """Replace a null or empty-string value.

    The output record only carries keys present in the input, so a field
    missing from the input stays missing.
    """

    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return passed(default_value)
        return None

    return validator
