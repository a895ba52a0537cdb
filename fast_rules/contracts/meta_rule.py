from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from fast_rules.core.rule_registry import RuleRegistry


class MetaRule(ABC):
    """A compiled declaration of one rule for one field."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def param(self) -> str | None:
        ...

    @abstractmethod
    def validate(self, field: str | int, value: Any, registry: 'RuleRegistry') -> None:
        """
        Raises:
            ValidationRuleException: If the value does not satisfy the rule.
            UnknownRuleException: If a named rule cannot be resolved.
        """
        ...
