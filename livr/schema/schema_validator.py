"""
Structural check for LIVR rules documents.

Catches malformed documents (non-mapping roots, descriptors with several
keys, numbers where rule names belong) with a path for every problem,
before any rule is compiled.
"""

from __future__ import annotations

from typing import Any

from jsonschema import Draft202012Validator, ValidationError as JsonSchemaError

from livr.errors import SchemaDefinitionError, SchemaIssue
from livr.schema.livr_rules_schema import LIVR_RULES_SCHEMA


_validator: Draft202012Validator | None = None


def _get_validator() -> Draft202012Validator:
    global _validator
    if _validator is None:
        Draft202012Validator.check_schema(LIVR_RULES_SCHEMA)
        _validator = Draft202012Validator(LIVR_RULES_SCHEMA)
    return _validator


def _format_path(error: JsonSchemaError) -> str:
    parts = [str(p) for p in error.absolute_path]
    return "/" + "/".join(parts) if parts else "/"


def _describe(error: JsonSchemaError) -> str:
    if error.validator == "anyOf":
        return f"{error.instance!r} is not a rule name, a single-key rule mapping or a list of those"
    return error.message


def validate_livr_schema(data: Any) -> None:
    """Check that ``data`` has the shape of a LIVR rules document.

    Args:
        data: Parsed rules document (dict from YAML/JSON).

    Raises:
        SchemaDefinitionError: If the document is malformed, listing every issue.
    """
    validator = _get_validator()
    raw_errors = sorted(validator.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
    if raw_errors:
        issues = [
            SchemaIssue(
                path=_format_path(e),
                message=_describe(e),
                keyword=str(e.validator),
            )
            for e in raw_errors
        ]
        raise SchemaDefinitionError(issues)
