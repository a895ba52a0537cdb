from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_numeric, to_number


class MaxRule(ValidatorRule):
    """`max:N` - the value must be numeric and less than or equal to N."""

    name = 'max'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None or not is_numeric(param):
            self.misused('max_requires_number')

        if not is_numeric(value):
            self.fail(field, 'field_must_be_numeric')
        if not to_number(value) <= to_number(param):
            self.fail(field, 'field_max_value', param)
