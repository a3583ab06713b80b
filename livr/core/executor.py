"""
Run compiled pipelines against input records.

Per field, validators run in declared order and the first truthy error
stops that field. Fields are independent of each other: every field is
evaluated and all errors are collected. A passing field is copied to the
output only when its key was present in the input.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from livr.types import (
    FORMAT_ERROR,
    UNSET,
    ErrorCode,
    Pipeline,
    ValidationOutcome,
)


def _unpack(result: Any) -> tuple[Optional[ErrorCode], Any]:
    if isinstance(result, tuple) and len(result) == 2:
        return result[0], result[1]
    return result, UNSET


def run_pipeline(
    pipeline: Pipeline,
    value: Any,
    record: Mapping[str, Any],
) -> tuple[Optional[ErrorCode], Any]:
    """Run one field pipeline and return ``(error, final_value)``."""
    for validator in pipeline:
        error, replacement = _unpack(validator(value, record))
        if error:
            return error, value
        if replacement is not UNSET:
            value = replacement
    return None, value


def execute(
    pipelines: Mapping[str, Pipeline],
    data: Any,
) -> ValidationOutcome:
    if not isinstance(data, Mapping):
        return ValidationOutcome(errors=FORMAT_ERROR)

    errors: dict[str, ErrorCode] = {}
    output: dict[str, Any] = {}

    for field, pipeline in pipelines.items():
        error, value = run_pipeline(pipeline, data.get(field), data)
        if error:
            errors[field] = error
            continue
        if field in data:
            output[field] = value

    if errors:
        return ValidationOutcome(errors=errors)
    return ValidationOutcome(output=output)


def trim_strings(data: Any) -> Any:
    """Strip surrounding whitespace from every string, recursively."""
    if isinstance(data, str):
        return data.strip()
    if isinstance(data, Mapping):
        return {key: trim_strings(value) for key, value in data.items()}
    if isinstance(data, list):
        return [trim_strings(item) for item in data]
    return data
