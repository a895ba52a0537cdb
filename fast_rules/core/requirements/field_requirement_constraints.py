from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from fast_rules.contracts.message_source import MessageSource
from fast_rules.contracts.meta_rule import MetaRule
from fast_rules.exceptions.configuration_exceptions import InvalidRuleParameterException

RULE_REQUIRED = 'required'
RULE_REQUIRED_WITHOUT = 'requiredwithout'
RULE_NULLABLE = 'nullable'

REQUIREMENT_RULES = frozenset({RULE_REQUIRED, RULE_REQUIRED_WITHOUT})


@dataclass(frozen=True)
class FieldRequirementConstraints:
    """Presence requirements of one field, derived from its rule list."""

    is_required: bool = False
    required_without_fields: tuple[str, ...] = ()

    @classmethod
    def from_meta_rules(
        cls,
        field: str | int,
        meta_rules: Sequence[MetaRule],
        messages: MessageSource,
    ) -> FieldRequirementConstraints:
        """
        Collect every `required` and `requiredWithout` entry of the field.

        Raises:
            InvalidRuleParameterException: If `requiredWithout` has no field
                name or names the field itself.
        """
        is_required = False
        required_without: list[str] = []

        for meta_rule in meta_rules:
            name = meta_rule.name.lower()
            if name == RULE_REQUIRED:
                is_required = True
            elif name == RULE_REQUIRED_WITHOUT:
                other = meta_rule.param
                if other is None:
                    raise InvalidRuleParameterException(messages.get('requiredwithout_requires_field_name'))
                if other == str(field):
                    raise InvalidRuleParameterException(
                        messages.get('requiredwithout_cannot_reference_itself', field)
                    )
                if other not in required_without:
                    required_without.append(other)

        return cls(is_required=is_required, required_without_fields=tuple(required_without))

    @property
    def has_requirement_rules(self) -> bool:
        return self.is_required or bool(self.required_without_fields)

    def format_required_without_list(self) -> str:
        """`'b'` for a single field, `one of 'b', 'c'` for several."""
        quoted = [f"'{name}'" for name in self.required_without_fields]
        if len(quoted) == 1:
            return quoted[0]
        return 'one of ' + ', '.join(quoted)
