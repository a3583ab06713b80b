"""
Load LIVR rules documents from YAML or JSON.

JSON is a subset of YAML, so both go through ``yaml.safe_load``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Union

import yaml

from livr.errors import SchemaDefinitionError, SchemaIssue
from livr.schema.schema_validator import validate_livr_schema


def loads_livr_rules(text: str) -> dict[str, Any]:
    """Parse and structurally check a rules document held in a string."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SchemaDefinitionError(
            [SchemaIssue(path="/", message=f"not valid YAML/JSON: {e}", keyword="parse")]
        ) from e

    validate_livr_schema(data)
    return data


def load_livr_rules(path: Union[str, Path]) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return loads_livr_rules(f.read())
