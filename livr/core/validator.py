"""
Main LIVR validator class.

This is the primary entry point: it owns a rules schema, compiles it once
into per-field pipelines and runs those pipelines against input records.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from livr.core.compiler import compile_rules
from livr.core.executor import execute, trim_strings
from livr.core.registry import (
    RuleRegistry,
    get_default_registry,
    get_default_rules,
    register_default_rules,
)
from livr.types import (
    ErrorCode,
    Pipeline,
    RuleBuilder,
    ValidationOutcome,
    ValidatorOptions,
)
from livr.utils.logger import Logger, create_logger


class Validator:
    """
    Validator for a single LIVR rules schema.

    A Validator copies the default rule registry when it is created, so
    later calls to ``register_default_rules`` do not affect it. Rules may
    be added per instance with ``register_rules`` until the schema is
    compiled; compilation happens on the first ``validate``/``check`` call
    or on an explicit ``prepare``.

    ``validate`` stores its errors on the instance for ``get_errors``, so
    one instance must not be shared by concurrent ``validate`` callers.
    ``check`` returns the outcome directly and is safe to share once the
    instance is prepared.

    Example:
        >>> validator = Validator({
        ...     "name": "required",
        ...     "email": ["required", "email"],
        ...     "gender": {"one_of": [["male", "female"]]},
        ... })
        >>> validator.validate({"name": "Ann", "email": "ann@example.com"})
        {'name': 'Ann', 'email': 'ann@example.com'}
        >>> validator.validate({"email": "nope"})
        False
        >>> validator.get_errors()
        {'name': 'REQUIRED', 'email': 'WRONG_EMAIL'}
    """

    def __init__(
        self,
        livr_rules: Mapping[str, Any],
        options: Optional[ValidatorOptions] = None,
        *,
        registry: Optional[RuleRegistry] = None,
        logger: Optional[Logger] = None,
    ):
        options = options or ValidatorOptions()

        self._livr_rules = livr_rules
        self._auto_trim = options.auto_trim
        self._logger = logger or create_logger(options.log_level)
        self._registry = (registry if registry is not None else get_default_registry()).copy()

        self._pipelines: dict[str, Pipeline] = {}
        self._is_prepared = False
        self._errors: Optional[Union[dict[str, ErrorCode], str]] = None

        if options.prepare:
            self.prepare()

    @property
    def is_prepared(self) -> bool:
        return self._is_prepared

    def prepare(self) -> "Validator":
        """Compile the schema. Only the first call does any work."""
        if self._is_prepared:
            return self

        self._pipelines = compile_rules(self._livr_rules, self._registry)
        self._is_prepared = True

        self._logger.debug(
            "LIVR rules compiled",
            {
                "fields": len(self._pipelines),
                "validators": sum(len(p) for p in self._pipelines.values()),
            },
        )
        return self

    def check(self, data: Any) -> ValidationOutcome:
        """Validate ``data`` and return the outcome without storing errors."""
        self.prepare()

        if self._auto_trim:
            data = trim_strings(data)

        return execute(self._pipelines, data)

    def validate(self, data: Any) -> Union[dict[str, Any], bool]:
        """
        Validate ``data``.

        Returns:
            The cleaned output record, or ``False`` when validation failed.
            An empty dict is a successful result, so compare against
            ``False`` explicitly (or use ``check``).
        """
        outcome = self.check(data)
        self._errors = outcome.errors

        if not outcome.ok:
            self._logger.debug(
                "Validation failed",
                {
                    "fields": (
                        sorted(outcome.errors)
                        if isinstance(outcome.errors, dict)
                        else outcome.errors
                    )
                },
            )
            return False

        return outcome.output  # type: ignore[return-value]

    def get_errors(self) -> Optional[Union[dict[str, ErrorCode], str]]:
        """Errors of the latest ``validate`` call, or None if it passed."""
        return self._errors

    def register_rules(self, rules: Mapping[str, RuleBuilder]) -> "Validator":
        if self._is_prepared:
            self._logger.warn(
                "Rules registered after prepare() do not affect compiled pipelines",
                {"rules": sorted(rules)},
            )
        self._registry.register_many(rules)
        return self

    def get_rules(self) -> dict[str, RuleBuilder]:
        return self._registry.as_dict()

    @property
    def registry(self) -> RuleRegistry:
        return self._registry

    @classmethod
    def register_default_rules(cls, rules: Mapping[str, RuleBuilder]) -> type["Validator"]:
        register_default_rules(rules)
        return cls

    @classmethod
    def get_default_rules(cls) -> dict[str, RuleBuilder]:
        return get_default_rules()
