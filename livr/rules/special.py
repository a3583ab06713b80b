"""
Special rules: email, equal_to_field.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, TYPE_CHECKING

from livr.rules.common import is_empty
from livr.types import FieldValidator

if TYPE_CHECKING:
    from livr.core.registry import RuleRegistry


_EMAIL = re.compile(
    r"^([\w\-+]+(?:\.[\w\-+]+)*)@((?:[\w\-]+\.)*\w[\w\-]{0,66})\.([a-z]{2,63}(?:\.[a-z]{2})?)$",
    re.IGNORECASE,
)


def email(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if not isinstance(value, str):
            return "FORMAT_ERROR"
        if not _EMAIL.match(value):
            return "WRONG_EMAIL"
        return None

    return validator


def equal_to_field(field: Any, registry: "RuleRegistry") -> FieldValidator:
    """Value must equal the raw input value of another field."""

    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if value != record.get(field):
            return "FIELDS_NOT_EQUAL"
        return None

    return validator
