"""
Configuration errors raised while loading or compiling LIVR rules.

Field validation failures are never raised; they are reported through
``ValidationOutcome.errors`` and ``Validator.get_errors()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class LIVRError(Exception):
    """Base error for this package."""


class RuleNotRegisteredError(LIVRError):
    """Raised when a schema references a rule name missing from the registry."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"Rule [{name}] not registered")
        self.name = name


class RuleDescriptorError(LIVRError):
    """Raised when a rule descriptor or field spec has an unusable shape."""


class RuleArgumentError(LIVRError):
    """Raised when a rule builder rejects the arguments it was given."""

    def __init__(self, name: str, field: Optional[str], reason: str) -> None:
        where = f" for field [{field}]" if field is not None else ""
        super().__init__(f"Rule [{name}]{where} has invalid arguments: {reason}")
        self.name = name
        self.field = field
        self.reason = reason


@dataclass
class SchemaIssue:
    """A single structural problem found in a rules document."""

    path: str
    message: str
    keyword: str


class SchemaDefinitionError(LIVRError):
    """Raised when a rules document fails the structural schema check."""

    def __init__(self, issues: list[SchemaIssue]) -> None:
        summary = "\n".join(f"  - {i.path}: {i.message}" for i in issues)
        super().__init__(f"Invalid LIVR rules document:\n{summary}")
        self.issues = issues
