from __future__ import annotations

import inspect
import logging
import threading
from typing import Dict, Optional, Type

from fast_rules.contracts.message_source import MessageSource
from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.localization import Messages
from fast_rules.core.rules import get_builtin_rules

logger = logging.getLogger(__name__)


class RuleRegistry:
    """
    Name -> rule lookup with lazily created, shared rule instances.

    Rule names are case-insensitive. Each rule class is instantiated at most
    once per registry, on first use or by `warm_up()`, and the instance is
    then reused by every validator that shares the registry.
    """

    def __init__(self, messages: Optional[MessageSource] = None):
        self.messages = messages or Messages()
        self._rule_classes: Dict[str, Type[ValidatorRule]] = dict(get_builtin_rules())
        self._instances: Dict[str, ValidatorRule] = {}
        self._lock = threading.Lock()

    def register(self, name: str, rule_class: Type[ValidatorRule]) -> None:
        """Register (or replace) a rule class under `name`."""
        if not inspect.isclass(rule_class) or not issubclass(rule_class, ValidatorRule):
            raise TypeError(f"{rule_class} must inherit from ValidatorRule")

        key = name.lower()
        with self._lock:
            self._rule_classes[key] = rule_class
            self._instances.pop(key, None)

    def names(self) -> list[str]:
        return sorted(self._rule_classes)

    def resolve(self, name: str) -> Optional[ValidatorRule]:
        """Return the shared instance for `name`, or None when no such rule exists."""
        key = name.lower()
        instance = self._instances.get(key)
        if instance is not None:
            return instance

        with self._lock:
            instance = self._instances.get(key)
            if instance is not None:
                return instance

            rule_class = self._rule_classes.get(key)
            if rule_class is None:
                return None

            instance = rule_class(self.messages)
            self._instances[key] = instance
            logger.debug(f"Instantiated rule '{key}' ({rule_class.__name__})")
            return instance

    def warm_up(self) -> None:
        """Instantiate every registered rule up front."""
        for name in self.names():
            self.resolve(name)

    def is_warm(self) -> bool:
        return all(name in self._instances for name in self._rule_classes)

    def reset(self) -> None:
        """Drop cached instances (useful for testing)."""
        with self._lock:
            self._instances.clear()


_default_registry: Optional[RuleRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> RuleRegistry:
    """Process-wide registry used by validators created without one."""
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = RuleRegistry()
    return _default_registry
