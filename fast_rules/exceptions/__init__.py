"""Custom exceptions for fast-rules."""

from .common_exceptions import (
    AppException,
    ValidationException,
    TranslationNotFoundException,
    EnvInvalidException,
)
from .configuration_exceptions import (
    ConfigurationException,
    EmptyRuleException,
    InvalidRuleDeclarationException,
    UnknownRuleException,
    InvalidRuleParameterException,
)
from .http_exceptions import (
    HttpException,
    BadRequestException,
    ServerErrorException,
)
from .rule_exceptions import (
    ValidationRuleException,
    RequiredRuleException,
    RequiredWithoutRuleException,
    CustomRuleException,
    FieldNotFoundException,
)


__all__ = [
    # common
    "AppException",
    "ValidationException",
    "TranslationNotFoundException",
    "EnvInvalidException",
    # configuration
    "ConfigurationException",
    "EmptyRuleException",
    "InvalidRuleDeclarationException",
    "UnknownRuleException",
    "InvalidRuleParameterException",
    # http
    "HttpException",
    "BadRequestException",
    "ServerErrorException",
    # rules
    "ValidationRuleException",
    "RequiredRuleException",
    "RequiredWithoutRuleException",
    "CustomRuleException",
    "FieldNotFoundException",
]
