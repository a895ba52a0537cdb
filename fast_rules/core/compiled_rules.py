from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from fast_rules.contracts.message_source import MessageSource
from fast_rules.contracts.meta_rule import MetaRule
from fast_rules.core.localization import Messages
from fast_rules.core.meta_rules import CustomMetaRule, StandardMetaRule
from fast_rules.core.rule_parser import RuleParser
from fast_rules.exceptions.configuration_exceptions import InvalidRuleDeclarationException

RuleDeclaration = Union[str, Callable[[Any], Any]]
RuleDeclarations = Mapping[Union[str, int], Union[RuleDeclaration, Sequence[RuleDeclaration]]]


class CompiledRules:
    """
    Rule declarations compiled once into `MetaRule` lists.

    Each field maps to its rules in declaration order. The result is
    immutable and shared by every `validate` call of the owning validator.
    """

    def __init__(self, declarations: RuleDeclarations, messages: Optional[MessageSource] = None):
        messages = messages or Messages()
        compiled: dict[str | int, tuple[MetaRule, ...]] = {}
        for field, rules in declarations.items():
            if not isinstance(rules, (list, tuple)):
                rules = [rules]
            compiled[field] = tuple(self._compile_rule(field, rule, messages) for rule in rules)
        self._meta_rules_collection = MappingProxyType(compiled)

    @property
    def meta_rules_collection(self) -> Mapping[str | int, tuple[MetaRule, ...]]:
        return self._meta_rules_collection

    @staticmethod
    def _compile_rule(field: str | int, rule: Any, messages: MessageSource) -> MetaRule:
        if isinstance(rule, str):
            name, param = RuleParser.parse(rule, messages)
            return StandardMetaRule(name, param)
        if callable(rule):
            return CustomMetaRule(rule)
        raise InvalidRuleDeclarationException(
            messages.get('rule_declaration_invalid', field, type(rule).__name__)
        )
