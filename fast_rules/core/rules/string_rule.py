from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_string


class StringRule(ValidatorRule):
    name = 'string'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if not is_string(value):
            self.fail(field, 'field_must_be_a_string')
