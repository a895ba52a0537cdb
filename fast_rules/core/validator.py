from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from fast_rules.core.compiled_rules import CompiledRules, RuleDeclarations
from fast_rules.core.data_accessor import DataAccessor
from fast_rules.core.requirements.requirement_engine import RequirementEngine, RequirementState
from fast_rules.core.rule_registry import RuleRegistry, get_default_registry
from fast_rules.exceptions.common_exceptions import ValidationException
from fast_rules.exceptions.rule_exceptions import ValidationRuleException

logger = logging.getLogger(__name__)


class Validator:
    """
    Validates payloads against a fixed set of rule declarations.

    Declarations are compiled once, at construction, so a malformed rule
    fails early and one validator can check many payloads:

        validator = Validator(
            {
                'email': ['required', 'email'],
                'age': ['nullable', 'integer', 'min:18'],
                'phone': 'requiredWithout:email',
                'tags': lambda value: isinstance(value, list),
            },
            {'email.required': 'We need your email.'},
        )
        data = validator.validate(payload)
        data.get_field('email')

    Validation is fail-fast: fields are checked in declaration order and the
    first violation is raised as a `ValidationException` (HTTP 400).
    Custom messages are keyed `'<field>.<rule>'`, the rule part being
    case-insensitive.
    """

    def __init__(
        self,
        rules: RuleDeclarations,
        custom_messages: Optional[Mapping[str, str]] = None,
        *,
        registry: Optional[RuleRegistry] = None,
    ):
        self.registry = registry or get_default_registry()
        self.compiled_rules = CompiledRules(rules, self.registry.messages)
        self.custom_messages = dict(custom_messages or {})
        self.requirement_engine = RequirementEngine(self.registry.messages)

    def validate(self, payload: Any) -> DataAccessor:
        """
        Validate `payload` and return an accessor over it.

        Raises:
            ValidationException: On the first rule or requirement violation.
            ConfigurationException: If a declared rule is unknown or misused.
        """
        accessor = DataAccessor(payload, self.registry.messages)
        states = dict.fromkeys(self.compiled_rules.meta_rules_collection, RequirementState.UNEVALUATED)

        for field, meta_rules in self.compiled_rules.meta_rules_collection.items():
            try:
                states[field], value_rules = self.requirement_engine.validate(field, meta_rules, accessor)
                if not value_rules:
                    continue

                value = accessor.get_field(field)
                for meta_rule in value_rules:
                    try:
                        meta_rule.validate(field, value, self.registry)
                    except ValidationRuleException as e:
                        # The meta rule name is the declared one, e.g. 'minLength'
                        e.rule = meta_rule.name
                        raise
            except ValidationRuleException as e:
                if e.requirement_state is not None:
                    states[field] = e.requirement_state
                self._rethrow(field, e, states)

        return accessor

    def _rethrow(
        self,
        field: str | int,
        error: ValidationRuleException,
        states: dict[str | int, RequirementState],
    ) -> None:
        rule = error.rule or ''
        message = self._custom_message(field, rule) or error.message
        logger.debug(f"Field '{field}' failed rule '{rule}': {message}")
        raise ValidationException(message, field=field, rule=rule, requirement_states=states) from error

    def _custom_message(self, field: str | int, rule: str) -> Optional[str]:
        # Custom predicates have no name and cannot be targeted
        if not rule:
            return None
        rule = rule.lower()
        for key, message in self.custom_messages.items():
            custom_field, separator, custom_rule = key.rpartition('.')
            if not separator:
                continue
            if custom_field == str(field) and custom_rule.lower() == rule:
                return message
        return None
