from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, NoReturn

from fast_rules.contracts.message_source import MessageSource
from fast_rules.exceptions.configuration_exceptions import InvalidRuleParameterException
from fast_rules.exceptions.rule_exceptions import ValidationRuleException


class ValidatorRule(ABC):
    """
    Contract for name-addressable rules dispatched through the `RuleRegistry`.

    A single instance is shared by every validator and every thread, so
    implementations must not keep per-call state. Failures are reported by
    raising `ValidationRuleException`; a misused rule (e.g. `min` without a
    number) raises `InvalidRuleParameterException`.
    """

    name: str = ''

    def __init__(self, messages: MessageSource):
        self.messages = messages

    @abstractmethod
    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        """
        Validate a single field value.

        Args:
            field: The field name (or dotted path, or index) being validated.
            value: The value found at that field.
            param: The rule parameter from the declaration, or None.

        Raises:
            ValidationRuleException: If the value does not satisfy the rule.
        """
        raise NotImplementedError

    def fail(self, field: str | int, key: str, *args: Any) -> NoReturn:
        raise ValidationRuleException(self.messages.get(key, field, *args), field=field, rule=self.name)

    def misused(self, key: str, *args: Any) -> NoReturn:
        raise InvalidRuleParameterException(self.messages.get(key, *args))
