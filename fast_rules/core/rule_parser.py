from typing import Optional

from fast_rules.contracts.message_source import MessageSource
from fast_rules.core.localization import Messages
from fast_rules.exceptions.configuration_exceptions import EmptyRuleException


class RuleParser:
    """Splits a rule string such as `'min:10'` into its name and parameter."""

    SEPARATOR = ':'

    @staticmethod
    def parse(rule: str, messages: Optional[MessageSource] = None) -> tuple[str, Optional[str]]:
        """
        Parse a rule string into `(name, param)`.

        Only the first separator splits, so `'regex:^a:b$'` keeps the colon in
        its pattern. Whitespace around name and parameter is trimmed and an
        empty parameter becomes None. The name keeps its case; rule lookup
        normalizes it.

        Raises:
            EmptyRuleException: If the rule is empty or only whitespace.
        """
        rule = rule.strip()
        if rule == '':
            raise EmptyRuleException((messages or Messages()).get('rule_must_be_non_empty'))

        name, separator, param = rule.partition(RuleParser.SEPARATOR)
        name = name.rstrip()
        if name == '':
            raise EmptyRuleException((messages or Messages()).get('rule_must_be_non_empty'))

        if not separator:
            return name, None
        param = param.lstrip()
        return name, param or None
