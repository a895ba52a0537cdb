from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_integer, is_integer_like


class IntegerRule(ValidatorRule):
    """
    `integer` accepts integer-like values (`5`, `5.0`, `'5'`).
    `integer:strict` accepts native integers only. Booleans never pass.
    """

    name = 'integer'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None:
            passed = is_integer_like(value)
        elif param == 'strict':
            passed = is_integer(value)
        else:
            self.misused('integer_requires_strict_or_none')

        if not passed:
            self.fail(field, 'field_must_be_an_integer')
