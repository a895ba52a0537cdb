from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_array


class ArrayRule(ValidatorRule):
    """Lists and tuples. Mappings are objects, not arrays."""

    name = 'array'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if not is_array(value):
            self.fail(field, 'field_must_be_an_array')
