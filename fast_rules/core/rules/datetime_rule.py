from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import match_datetime


class DatetimeRule(ValidatorRule):
    """
    `datetime:FORMAT` - the string value must be a date in `strftime` FORMAT.

    The value has to survive a parse and format round trip unchanged, so
    `'2024-02-30'` fails `datetime:%Y-%m-%d`.
    """

    name = 'datetime'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None:
            self.misused('datetime_requires_format')

        if not isinstance(value, str) or not match_datetime(value, param):
            self.fail(field, 'field_must_match_datetime_format', param)
