from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_number, is_numeric


class NumericRule(ValidatorRule):
    """
    `numeric` accepts numbers and numeric strings.
    `numeric:strict` accepts native numbers only.
    """

    name = 'numeric'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None:
            passed = is_numeric(value)
        elif param == 'strict':
            passed = is_number(value)
        else:
            self.misused('numeric_requires_strict_or_none')

        if not passed:
            self.fail(field, 'field_must_be_numeric')
