"""
Rule compilation and execution engine.
"""

from livr.core.compiler import build_validator, compile_field, compile_rules
from livr.core.executor import execute, run_pipeline, trim_strings
from livr.core.parser import parse_field_rules, parse_rule
from livr.core.registry import (
    RuleRegistry,
    get_default_registry,
    get_default_rules,
    register_default_rules,
    reset_default_rules,
)
from livr.core.validator import Validator

__all__ = [
    "Validator",
    "RuleRegistry",
    "get_default_registry",
    "get_default_rules",
    "register_default_rules",
    "reset_default_rules",
    "parse_rule",
    "parse_field_rules",
    "build_validator",
    "compile_field",
    "compile_rules",
    "execute",
    "run_pipeline",
    "trim_strings",
]
