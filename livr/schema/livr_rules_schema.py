"""
JSON Schema describing the shape of a LIVR rules document.

Only the structure is checked here; whether rule names exist and whether
their arguments make sense is decided when the rules are compiled.
"""

LIVR_RULES_SCHEMA: dict = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "LIVR rules",
    "type": "object",
    "additionalProperties": {"$ref": "#/$defs/fieldRules"},
    "$defs": {
        "ruleName": {
            "type": "string",
            "minLength": 1,
        },
        "ruleDescriptor": {
            "anyOf": [
                {"$ref": "#/$defs/ruleName"},
                {
                    "type": "object",
                    "minProperties": 1,
                    "maxProperties": 1,
                    "propertyNames": {"minLength": 1},
                },
            ],
        },
        "fieldRules": {
            "anyOf": [
                {"type": "null"},
                {"$ref": "#/$defs/ruleDescriptor"},
                {
                    "type": "array",
                    "items": {"$ref": "#/$defs/ruleDescriptor"},
                },
            ],
        },
    },
}
