"""
LIVR - Language Independent Validation Rules.

Rules are plain data (a mapping of field name to rule descriptors), so
the same schema can be shared between services written in different
languages. A Validator compiles the rules once and then turns each input
record into either a cleaned output record or a map of error codes.

Example:
    >>> from livr import Validator
    >>>
    >>> validator = Validator({
    ...     "name": ["required", {"min_length": 2}],
    ...     "email": ["required", "email"],
    ... })
    >>> validator.validate({"name": "A", "email": "a@b.com"})
    False
    >>> validator.get_errors()
    {'name': 'TOO_SHORT'}
"""

from livr.core.validator import Validator
from livr.core.registry import (
    RuleRegistry,
    get_default_registry,
    get_default_rules,
    register_default_rules,
    reset_default_rules,
)
from livr.errors import (
    LIVRError,
    RuleArgumentError,
    RuleDescriptorError,
    RuleNotRegisteredError,
    SchemaDefinitionError,
    SchemaIssue,
)
from livr.types import (
    FORMAT_ERROR,
    UNSET,
    ErrorCode,
    FieldValidator,
    LogLevel,
    RuleBuilder,
    ValidationOutcome,
    ValidatorOptions,
    failed,
    passed,
)
from livr.schema import load_livr_rules, loads_livr_rules, validate_livr_schema

__all__ = [
    # Main
    "Validator",
    "ValidatorOptions",
    "ValidationOutcome",
    # Registry
    "RuleRegistry",
    "get_default_registry",
    "get_default_rules",
    "register_default_rules",
    "reset_default_rules",
    # Rule contract
    "FieldValidator",
    "RuleBuilder",
    "ErrorCode",
    "FORMAT_ERROR",
    "UNSET",
    "passed",
    "failed",
    "LogLevel",
    # Errors
    "LIVRError",
    "RuleNotRegisteredError",
    "RuleDescriptorError",
    "RuleArgumentError",
    "SchemaDefinitionError",
    "SchemaIssue",
    # Schema documents
    "load_livr_rules",
    "loads_livr_rules",
    "validate_livr_schema",
]
