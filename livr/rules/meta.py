"""
Meta rules built on top of the engine itself.

They compile their nested rules through the registry they receive, so
user-registered rules work inside them too. Their error codes are nested
structures: a field map for objects, a list aligned with the input items
for lists (None for items that passed).
"""

from __future__ import annotations

from typing import Any, Mapping, TYPE_CHECKING

from livr.core.compiler import compile_field, compile_rules
from livr.core.executor import execute, run_pipeline
from livr.rules.common import is_empty
from livr.types import FieldValidator, passed

if TYPE_CHECKING:
    from livr.core.registry import RuleRegistry


def _unpack_rule_args(args: tuple[Any, ...]) -> tuple[Any, "RuleRegistry"]:
    *rules, registry = args
    if len(rules) == 1 and isinstance(rules[0], (list, tuple)):
        return rules[0], registry
    return rules, registry


def nested_object(livr_rules: Any, registry: "RuleRegistry") -> FieldValidator:
    pipelines = compile_rules(livr_rules, registry)

    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        outcome = execute(pipelines, value)
        if not outcome.ok:
            return outcome.errors
        return passed(outcome.output)

    return validator


def list_of(*args: Any) -> FieldValidator:
    """Every item must pass the same rules: ``{"list_of": ["required", "integer"]}``."""
    field_rules, registry = _unpack_rule_args(args)
    pipeline = compile_field(field_rules, registry)

    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if not isinstance(value, list):
            return "FORMAT_ERROR"

        results: list[Any] = []
        errors: list[Any] = []
        for item in value:
            error, item_value = run_pipeline(pipeline, item, record)
            errors.append(error or None)
            results.append(item_value)

        if any(errors):
            return errors
        return passed(results)

    return validator


def list_of_objects(livr_rules: Any, registry: "RuleRegistry") -> FieldValidator:
    pipelines = compile_rules(livr_rules, registry)

    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        if not isinstance(value, list):
            return "FORMAT_ERROR"

        results: list[Any] = []
        errors: list[Any] = []
        for item in value:
            outcome = execute(pipelines, item)
            errors.append(outcome.errors)
            results.append(outcome.output)

        if any(errors):
            return errors
        return passed(results)

    return validator


def or_(*args: Any) -> FieldValidator:
    """Pass if any of the alternative rule sets passes; else the last error."""
    *rule_sets, registry = args
    if not rule_sets:
        raise ValueError("expected at least one alternative rule set")
    pipelines = [compile_field(rules, registry) for rules in rule_sets]

    def validator(value: Any, record: Mapping[str, Any]):
        if is_empty(value):
            return None
        last_error: Any = None
        for pipeline in pipelines:
            error, result = run_pipeline(pipeline, value, record)
            if not error:
                return passed(result)
            last_error = error
        return last_error

    return validator
