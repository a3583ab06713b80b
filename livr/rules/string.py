"""
String rules: one_of, min_length, max_length, length_equal,
length_between, like.

All of them skip empty values, compare numbers on their string form and
reject any other non-string value with FORMAT_ERROR.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, TYPE_CHECKING

from livr.rules.common import is_empty
from livr.types import FieldValidator

if TYPE_CHECKING:
    from livr.core.registry import RuleRegistry


MAX_PATTERN_LENGTH = 256

# Quantified group that is itself quantified, e.g. (a+)+ or (a*){2,}
_QUANTIFIED_GROUP_REPEAT = re.compile(r"[+*}]\s*\)\s*[+*{]")
# Two quantifiers in a row, e.g. a+* or a{2}+
_STACKED_QUANTIFIERS = re.compile(r"[+*}]\s*[+*{]")
# Alternatives that both start with a wildcard run, e.g. .*a|.*b
_WILDCARD_ALTERNATION = re.compile(r"\.\*.*\|.*\.\*")
# Escaped characters and character classes match one literal character
_ESCAPE = re.compile(r"\\.")
_CHAR_CLASS = re.compile(r"\[\^?\]?(?:\\.|[^\]\\])*\]")

_FLAGS = {"i": re.IGNORECASE, "m": re.MULTILINE, "s": re.DOTALL}


def as_text(value: Any) -> Optional[str]:
    """String form of a scalar, or None when the value is not scalar."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def is_safe_pattern(pattern: str) -> bool:
    """Reject overly long patterns and shapes prone to catastrophic backtracking."""
    if len(pattern) > MAX_PATTERN_LENGTH:
        return False
    shape_text = _CHAR_CLASS.sub("x", pattern)
    shape_text = _ESCAPE.sub("x", shape_text)
    for shape in (_QUANTIFIED_GROUP_REPEAT, _STACKED_QUANTIFIERS, _WILDCARD_ALTERNATION):
        if shape.search(shape_text):
            return False
    return True


def _unpack_list_args(args: tuple[Any, ...]) -> tuple[list[Any], "RuleRegistry"]:
    """Split ``(*values, registry)``; a single list argument is the value list."""
    *values, registry = args
    if len(values) == 1 and isinstance(values[0], (list, tuple)):
        values = list(values[0])
    return values, registry


def one_of(*args: Any) -> FieldValidator:
    allowed, _ = _unpack_list_args(args)
    allowed_text = {as_text(a) for a in allowed if as_text(a) is not None}

    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        text = as_text(value)
        if text is None:
            return "FORMAT_ERROR"
        if text not in allowed_text:
            return "NOT_ALLOWED_VALUE"
        return None

    return validator


def _length_rule(min_len: Optional[int], max_len: Optional[int]) -> FieldValidator:
    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        text = as_text(value)
        if text is None:
            return "FORMAT_ERROR"
        if min_len is not None and len(text) < min_len:
            return "TOO_SHORT"
        if max_len is not None and len(text) > max_len:
            return "TOO_LONG"
        return None

    return validator


def _whole_number(arg: Any) -> int:
    number = float(arg)
    if not number.is_integer():
        raise ValueError(f"expected a whole number, got {arg!r}")
    return int(number)


def min_length(min_len: Any, registry: "RuleRegistry") -> FieldValidator:
    return _length_rule(_whole_number(min_len), None)


def max_length(max_len: Any, registry: "RuleRegistry") -> FieldValidator:
    return _length_rule(None, _whole_number(max_len))


def length_equal(length: Any, registry: "RuleRegistry") -> FieldValidator:
    return _length_rule(_whole_number(length), _whole_number(length))


def length_between(min_len: Any, max_len: Any, registry: "RuleRegistry") -> FieldValidator:
    return _length_rule(_whole_number(min_len), _whole_number(max_len))


def like(pattern: Any, *args: Any) -> FieldValidator:
    """Match ``pattern`` anywhere in the value; optional flags string ("i")."""
    *flag_args, _ = args
    if not isinstance(pattern, str):
        raise ValueError(f"pattern must be a string, got {pattern!r}")
    if not is_safe_pattern(pattern):
        raise ValueError(f"pattern is potentially unsafe (ReDoS risk): {pattern}")

    flags = 0
    for flag_text in flag_args:
        for letter in str(flag_text):
            if letter not in _FLAGS:
                raise ValueError(f"unsupported regex flag {letter!r}")
            flags |= _FLAGS[letter]
    compiled = re.compile(pattern, flags)

    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        text = as_text(value)
        if text is None:
            return "FORMAT_ERROR"
        if not compiled.search(text):
            return "WRONG_FORMAT"
        return None

    return validator
