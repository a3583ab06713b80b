"""
Loading and structural checking of LIVR rules documents.
"""

from livr.schema.loader import load_livr_rules, loads_livr_rules
from livr.schema.schema_validator import validate_livr_schema

__all__ = [
    "load_livr_rules",
    "loads_livr_rules",
    "validate_livr_schema",
]
