from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_numeric, to_number


class MinRule(ValidatorRule):
    """`min:N` - the value must be numeric and greater than or equal to N."""

    name = 'min'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None or not is_numeric(param):
            self.misused('min_requires_number')

        if not is_numeric(value):
            self.fail(field, 'field_must_be_numeric')
        if not to_number(value) >= to_number(param):
            self.fail(field, 'field_min_value', param)
