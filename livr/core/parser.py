"""
Normalization of rule descriptors.

    "required"                 -> ("required", ())
    {"min_length": 4}          -> ("min_length", (4,))
    {"min_length": [4]}        -> ("min_length", (4,))
    {"length_between": [1, 9]} -> ("length_between", (1, 9))
"""

from __future__ import annotations

from typing import Any, Mapping

from livr.errors import RuleDescriptorError


ParsedRule = tuple[str, tuple[Any, ...]]


def parse_rule(livr_rule: Any) -> ParsedRule:
    if isinstance(livr_rule, Mapping):
        if len(livr_rule) != 1:
            raise RuleDescriptorError(
                f"Rule descriptor must have exactly one key, got {sorted(map(str, livr_rule))}"
            )
        ((name, args),) = livr_rule.items()
        if not isinstance(name, str):
            raise RuleDescriptorError(f"Rule name must be a string, got {name!r}")
        if not isinstance(args, (list, tuple)):
            args = (args,)
        return name, tuple(args)

    if isinstance(livr_rule, str):
        return livr_rule, ()

    raise RuleDescriptorError(f"Unsupported rule descriptor: {livr_rule!r}")


def parse_field_rules(field_rules: Any) -> list[ParsedRule]:
    """Parse a field spec: one descriptor or a sequence of descriptors."""
    if field_rules is None:
        return []
    if isinstance(field_rules, (Mapping, str)):
        field_rules = [field_rules]
    if not isinstance(field_rules, (list, tuple)):
        raise RuleDescriptorError(f"Unsupported field rules: {field_rules!r}")
    return [parse_rule(rule) for rule in field_rules]
