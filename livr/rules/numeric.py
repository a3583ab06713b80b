"""
Numeric rules.

Numbers may arrive as int/float or as their string form. Booleans, NaN
and infinities are never numbers.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional, TYPE_CHECKING

from livr.rules.common import is_empty
from livr.types import FieldValidator

if TYPE_CHECKING:
    from livr.core.registry import RuleRegistry


_INTEGER = re.compile(r"-?\d+")
_DECIMAL = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")
_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def to_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        if _NUMBER.fullmatch(value) is None:
            return None
        number = float(value)
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer() and "e" not in repr(value)
    return isinstance(value, str) and _INTEGER.fullmatch(value) is not None


def _is_decimal(value: Any) -> bool:
    if isinstance(value, str):
        return _DECIMAL.fullmatch(value) is not None
    return to_number(value) is not None


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def integer(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if not _is_scalar(value):
            return "FORMAT_ERROR"
        if not _is_integer(value):
            return "NOT_INTEGER"
        return None

    return validator


def positive_integer(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if not _is_scalar(value):
            return "FORMAT_ERROR"
        if not _is_integer(value) or to_number(value) <= 0:  # type: ignore[operator]
            return "NOT_POSITIVE_INTEGER"
        return None

    return validator


def decimal(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if not _is_scalar(value):
            return "FORMAT_ERROR"
        if not _is_decimal(value):
            return "NOT_DECIMAL"
        return None

    return validator


def positive_decimal(registry: "RuleRegistry") -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if not _is_scalar(value):
            return "FORMAT_ERROR"
        if not _is_decimal(value) or to_number(value) <= 0:  # type: ignore[operator]
            return "NOT_POSITIVE_DECIMAL"
        return None

    return validator


def _range_rule(low: Optional[float], high: Optional[float]) -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if not _is_scalar(value):
            return "FORMAT_ERROR"
        number = to_number(value)
        if number is None:
            return "NOT_NUMBER"
        if low is not None and number < low:
            return "TOO_LOW"
        if high is not None and number > high:
            return "TOO_HIGH"
        return None

    return validator


def _bound(limit: Any) -> float:
    number = to_number(limit)
    if number is None:
        raise ValueError(f"expected a finite number, got {limit!r}")
    return number


def min_number(low: Any, registry: "RuleRegistry") -> FieldValidator:
    return _range_rule(_bound(low), None)


def max_number(high: Any, registry: "RuleRegistry") -> FieldValidator:
    return _range_rule(None, _bound(high))


def number_between(low: Any, high: Any, registry: "RuleRegistry") -> FieldValidator:
    return _range_rule(_bound(low), _bound(high))
