from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_email_address


class EmailRule(ValidatorRule):
    """Syntax check only; no DNS lookups are made."""

    name = 'email'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if not is_email_address(value):
            self.fail(field, 'field_must_be_a_valid_email')
