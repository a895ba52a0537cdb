from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import is_enum_value


class EnumRule(ValidatorRule):
    """
    `enum:package.module.EnumClass` - the value must belong to the enum.

    `int` and `str` backed enums are matched by value, plain enums by member
    name. An enum class that cannot be imported fails every value.
    """

    name = 'enum'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None:
            self.misused('enum_requires_class_name')

        if not is_enum_value(value, param):
            self.fail(field, 'field_must_be_a_valid_enum_value', param)
