"""Built-in rules, addressable by their lower-cased names."""

from .array_rule import ArrayRule
from .datetime_rule import DatetimeRule
from .email_rule import EmailRule
from .enum_rule import EnumRule
from .file_rule import FileRule
from .integer_rule import IntegerRule
from .max_length_rule import MaxLengthRule
from .max_rule import MaxRule
from .min_length_rule import MinLengthRule
from .min_rule import MinRule
from .numeric_rule import NumericRule
from .regex_rule import RegexRule
from .string_rule import StringRule


def get_builtin_rules() -> dict[str, type]:
    """Return a mapping of rule name -> rule class for built-in rules."""
    return {
        rule.name: rule
        for rule in (
            IntegerRule,
            NumericRule,
            StringRule,
            ArrayRule,
            MinRule,
            MaxRule,
            MinLengthRule,
            MaxLengthRule,
            EmailRule,
            RegexRule,
            DatetimeRule,
            EnumRule,
            FileRule,
        )
    }


__all__ = [
    "ArrayRule",
    "DatetimeRule",
    "EmailRule",
    "EnumRule",
    "FileRule",
    "IntegerRule",
    "MaxLengthRule",
    "MaxRule",
    "MinLengthRule",
    "MinRule",
    "NumericRule",
    "RegexRule",
    "StringRule",
    "get_builtin_rules",
]
