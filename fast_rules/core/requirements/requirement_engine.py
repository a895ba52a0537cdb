from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence

from fast_rules.contracts.message_source import MessageSource
from fast_rules.contracts.meta_rule import MetaRule
from fast_rules.core.data_accessor import DataAccessor
from fast_rules.core.localization import Messages
from fast_rules.core.requirements.field_requirement_constraints import (
    REQUIREMENT_RULES,
    RULE_NULLABLE,
    FieldRequirementConstraints,
)
from fast_rules.exceptions.rule_exceptions import RequiredRuleException, RequiredWithoutRuleException

logger = logging.getLogger(__name__)


class RequirementState(Enum):
    UNEVALUATED = 'unevaluated'
    REQUIRED_FAILED = 'required_failed'
    REQUIRED_WITHOUT_FAILED = 'required_without_failed'
    SKIP_DUE_TO_ABSENCE = 'skip_due_to_absence'
    SKIP_DUE_TO_NULLABLE = 'skip_due_to_nullable'
    PROCEED_TO_VALUE_RULES = 'proceed_to_value_rules'

    @property
    def should_skip(self) -> bool:
        return self in (RequirementState.SKIP_DUE_TO_ABSENCE, RequirementState.SKIP_DUE_TO_NULLABLE)


class RequirementEngine:
    """
    Decides, for one field, whether its value rules run at all.

    Presence is resolved first (`required`, then `requiredWithout`). A
    `None` value counts as present, so `nullable` only comes into play once
    presence has passed, where it skips the value rules for `None`.
    """

    def __init__(self, messages: Optional[MessageSource] = None):
        self.messages = messages or Messages()

    def evaluate(
        self,
        field: str | int,
        meta_rules: Sequence[MetaRule],
        accessor: DataAccessor,
    ) -> RequirementState:
        """
        Run the presence checks for `field`.

        Returns:
            A skip state, or `PROCEED_TO_VALUE_RULES`.

        Raises:
            RequiredRuleException: If a required field is absent.
            RequiredWithoutRuleException: If the field and one of its
                alternatives are both present, or all of them are absent.
            InvalidRuleParameterException: If a `requiredWithout` entry is malformed.
        """
        constraints = FieldRequirementConstraints.from_meta_rules(field, meta_rules, self.messages)
        is_present = accessor.has_field(field)

        if constraints.is_required and not is_present:
            raise RequiredRuleException(
                self.messages.get('required_field_missing', field),
                field=field,
                rule='required',
                requirement_state=RequirementState.REQUIRED_FAILED,
            )

        if constraints.required_without_fields:
            others_present = any(accessor.has_field(other) for other in constraints.required_without_fields)
            if is_present and others_present:
                raise RequiredWithoutRuleException(
                    self.messages.get(
                        'only_one_of_fields_can_be_present',
                        field,
                        constraints.format_required_without_list(),
                    ),
                    field=field,
                    rule='requiredWithout',
                    requirement_state=RequirementState.REQUIRED_WITHOUT_FAILED,
                )
            if not is_present and not others_present:
                raise RequiredWithoutRuleException(
                    self.messages.get(
                        'either_field_or_other_must_be_present',
                        field,
                        constraints.format_required_without_list(),
                    ),
                    field=field,
                    rule='requiredWithout',
                    requirement_state=RequirementState.REQUIRED_WITHOUT_FAILED,
                )

        if not is_present:
            return RequirementState.SKIP_DUE_TO_ABSENCE

        if self.is_nullable(meta_rules) and accessor.get_field(field) is None:
            return RequirementState.SKIP_DUE_TO_NULLABLE

        return RequirementState.PROCEED_TO_VALUE_RULES

    def validate(
        self,
        field: str | int,
        meta_rules: Sequence[MetaRule],
        accessor: DataAccessor,
    ) -> tuple[RequirementState, tuple[MetaRule, ...]]:
        """
        Evaluate `field` and return its state with the value rules still to run.

        The rule tuple is empty whenever the state is a skip state.
        """
        state = self.evaluate(field, meta_rules, accessor)
        if self.should_skip_further_validation(state):
            logger.debug(f"Skipping value rules for field '{field}': {state.value}")
            return state, ()
        return state, self.filter_out_requirement_rules(meta_rules)

    @staticmethod
    def should_skip_further_validation(state: RequirementState) -> bool:
        return state.should_skip

    @staticmethod
    def is_nullable(meta_rules: Sequence[MetaRule]) -> bool:
        return any(meta_rule.name.lower() == RULE_NULLABLE for meta_rule in meta_rules)

    @staticmethod
    def filter_out_requirement_rules(meta_rules: Sequence[MetaRule]) -> tuple[MetaRule, ...]:
        """Drop `required`, `requiredWithout` and `nullable`, keeping order."""
        return tuple(
            meta_rule
            for meta_rule in meta_rules
            if meta_rule.name.lower() not in REQUIREMENT_RULES and meta_rule.name.lower() != RULE_NULLABLE
        )
