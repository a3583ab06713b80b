"""
Compile LIVR rules into per-field pipelines of field validators.
"""

from __future__ import annotations

import re
from typing import Any, Mapping, Optional, TYPE_CHECKING

from livr.core.parser import parse_field_rules
from livr.errors import LIVRError, RuleArgumentError, RuleDescriptorError
from livr.types import FieldValidator, Pipeline

if TYPE_CHECKING:
    from livr.core.registry import RuleRegistry


def build_validator(
    name: str,
    args: tuple[Any, ...],
    registry: "RuleRegistry",
    field: Optional[str] = None,
) -> FieldValidator:
    """Resolve one rule and call its builder with ``*args, registry``."""
    builder = registry.get(name)
    try:
        validator = builder(*args, registry)
    except LIVRError:
        raise
    except (TypeError, ValueError, re.error) as e:
        raise RuleArgumentError(name, field, str(e)) from e

    if not callable(validator):
        raise RuleArgumentError(name, field, "builder did not return a callable")
    return validator


def compile_field(
    field_rules: Any,
    registry: "RuleRegistry",
    field: Optional[str] = None,
) -> Pipeline:
    return tuple(
        build_validator(name, args, registry, field)
        for name, args in parse_field_rules(field_rules)
    )


def compile_rules(
    livr_rules: Mapping[str, Any],
    registry: "RuleRegistry",
) -> dict[str, Pipeline]:
    """Build an isolated pipeline for every declared field, in order.

    Raises:
        RuleNotRegisteredError: a rule name is missing from the registry.
        RuleDescriptorError: a descriptor has an unusable shape.
        RuleArgumentError: a builder rejected its arguments.
    """
    if not isinstance(livr_rules, Mapping):
        raise RuleDescriptorError(
            f"LIVR rules must be a mapping of field to rules, got {type(livr_rules).__name__}"
        )

    pipelines: dict[str, Pipeline] = {}
    for field, field_rules in livr_rules.items():
        pipelines[field] = compile_field(field_rules, registry, field)
    return pipelines
