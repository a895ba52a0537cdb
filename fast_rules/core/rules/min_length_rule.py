from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import byte_length, is_integer_like


class MinLengthRule(ValidatorRule):
    """
    `minLength:N` - the value must be a string of at least N bytes.

    Length is measured on the UTF-8 encoding, so `'é'` counts as 2.
    """

    name = 'minlength'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None or not is_integer_like(param):
            self.misused('minlength_requires_integer')

        if not isinstance(value, str) or byte_length(value) < int(param):
            self.fail(field, 'field_min_length', param)
