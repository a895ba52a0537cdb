from typing import Any

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.native_functions import match_regex


class RegexRule(ValidatorRule):
    """
    `regex:PATTERN` - the string value must contain a match for PATTERN.

    Anchor the pattern (`^...$`) to require a full match. A pattern that
    does not compile fails the value instead of raising.
    """

    name = 'regex'

    def validate(self, field: str | int, value: Any, param: str | None) -> None:
        if param is None:
            self.misused('regex_requires_pattern')

        if not isinstance(value, str) or not match_regex(value, param):
            self.fail(field, 'field_must_match_pattern', param)
