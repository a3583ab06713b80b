"""
Rule registry: maps rule names to validator builders.

Every Validator works on its own copy of a registry. The process-wide
default registry is created lazily, seeded once with the built-in rules,
and copied by each new Validator at construction time. Registering rules
is meant to happen at configuration time, before validation traffic
starts; a lock still guards mutation so late registration cannot corrupt
the mapping.
"""

from __future__ import annotations

import threading
from typing import Iterator, Mapping, Optional

from livr.errors import RuleDescriptorError, RuleNotRegisteredError
from livr.types import RuleBuilder


class RuleRegistry:
    """Mapping of rule name to builder. Later registrations win."""

    def __init__(self, rules: Optional[Mapping[str, RuleBuilder]] = None):
        self._builders: dict[str, RuleBuilder] = {}
        self._lock = threading.RLock()
        if rules:
            self.register_many(rules)

    def register(self, name: str, builder: RuleBuilder) -> "RuleRegistry":
        if not isinstance(name, str) or not name:
            raise RuleDescriptorError(f"Rule name must be a non-empty string, got {name!r}")
        if not callable(builder):
            raise RuleDescriptorError(f"Builder for rule [{name}] is not callable")
        with self._lock:
            self._builders[name] = builder
        return self

    def register_many(self, rules: Mapping[str, RuleBuilder]) -> "RuleRegistry":
        with self._lock:
            for name, builder in rules.items():
                self.register(name, builder)
        return self

    def get(self, name: str) -> RuleBuilder:
        try:
            return self._builders[name]
        except (KeyError, TypeError):
            raise RuleNotRegisteredError(name) from None

    def names(self) -> list[str]:
        return list(self._builders)

    def as_dict(self) -> dict[str, RuleBuilder]:
        with self._lock:
            return dict(self._builders)

    def copy(self) -> "RuleRegistry":
        return RuleRegistry(self.as_dict())

    def __contains__(self, name: object) -> bool:
        return name in self._builders

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._builders)

    def __repr__(self) -> str:
        return f"RuleRegistry({len(self)} rules)"


_default_registry: Optional[RuleRegistry] = None
_default_lock = threading.Lock()


def _builtin_rules() -> dict[str, RuleBuilder]:
    from livr.rules import DEFAULT_RULES

    return dict(DEFAULT_RULES)


def get_default_registry() -> RuleRegistry:
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = RuleRegistry(_builtin_rules())
    return _default_registry


def register_default_rules(rules: Mapping[str, RuleBuilder]) -> RuleRegistry:
    """Add or override rules for every Validator created afterwards."""
    return get_default_registry().register_many(rules)


def get_default_rules() -> dict[str, RuleBuilder]:
    return get_default_registry().as_dict()


def reset_default_rules() -> RuleRegistry:
    """Drop process-wide registrations and reseed with the built-ins."""
    global _default_registry
    with _default_lock:
        _default_registry = RuleRegistry(_builtin_rules())
    return _default_registry
