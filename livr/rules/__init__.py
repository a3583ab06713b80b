"""
Built-in LIVR rules.

Every builder takes the descriptor arguments followed by the active
registry and returns a field validator ``(value, record)``.
"""

from livr.rules import common, meta, modifiers, numeric, special, string
from livr.types import RuleBuilder

DEFAULT_RULES: dict[str, RuleBuilder] = {
    # Common
    "required": common.required,
    "not_empty": common.not_empty,
    "not_empty_list": common.not_empty_list,
    # String
    "one_of": string.one_of,
    "min_length": string.min_length,
    "max_length": string.max_length,
    "length_equal": string.length_equal,
    "length_between": string.length_between,
    "like": string.like,
    # Numeric
    "integer": numeric.integer,
    "positive_integer": numeric.positive_integer,
    "decimal": numeric.decimal,
    "positive_decimal": numeric.positive_decimal,
    "min_number": numeric.min_number,
    "max_number": numeric.max_number,
    "number_between": numeric.number_between,
    # Special
    "email": special.email,
    "equal_to_field": special.equal_to_field,
    # Meta
    "nested_object": meta.nested_object,
    "list_of": meta.list_of,
    "list_of_objects": meta.list_of_objects,
    "or": meta.or_,
    # Modifiers
    "trim": modifiers.trim,
    "to_lc": modifiers.to_lc,
    "to_uc": modifiers.to_uc,
    "default": modifiers.default,
}

__all__ = ["DEFAULT_RULES"]
