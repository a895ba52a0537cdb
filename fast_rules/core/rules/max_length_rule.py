from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import byte_length, is_integer_like


class MaxLengthRule(ValidatorRule):
    """`maxLength:N` - the value must be a string of at most N UTF-8 bytes."""

    name = 'maxlength'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None or not is_integer_like(param):
            self.misused('maxlength_requires_integer')

        if not isinstance(value, str) or byte_length(value) > int(param):
            self.fail(field, 'field_max_length', param)
