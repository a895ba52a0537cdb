from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from fast_rules.contracts.meta_rule import MetaRule
from fast_rules.exceptions.configuration_exceptions import UnknownRuleException
from fast_rules.exceptions.rule_exceptions import CustomRuleException

if TYPE_CHECKING:
    from fast_rules.core.rule_registry import RuleRegistry


@dataclass(frozen=True, slots=True)
class StandardMetaRule(MetaRule):
    """A named rule, dispatched through the registry."""

    rule_name: str
    rule_param: str | None = None

    @property
    def name(self) -> str:
        return self.rule_name

    @property
    def param(self) -> str | None:
        return self.rule_param

    def validate(self, field: str | int, value: Any, registry: 'RuleRegistry') -> None:
        rule = registry.resolve(self.rule_name)
        if rule is None:
            raise UnknownRuleException(
                registry.messages.get('unknown_rule', self.rule_name),
                rule=self.rule_name,
            )
        rule.validate(field, value, self.rule_param)


@dataclass(frozen=True, slots=True)
class CustomMetaRule(MetaRule):
    """
    A user supplied predicate.

    Only a return value that `is False` fails; `None`, `0` and other falsy
    values pass. Custom rules have an empty name, so custom messages cannot
    target them.
    """

    predicate: Callable[[Any], Any]

    @property
    def name(self) -> str:
        return ''

    @property
    def param(self) -> None:
        return None

    def validate(self, field: str | int, value: Any, registry: 'RuleRegistry') -> None:
        if self.predicate(value) is not False:
            return
        raise CustomRuleException(
            registry.messages.get('field_failed_custom_validation', field),
            field=field,
            rule=self.name,
        )
