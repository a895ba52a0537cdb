"""Core validation engine re-exported for convenient access."""

from .api import validate_query, validate_request
from .compiled_rules import CompiledRules
from .data_accessor import DataAccessor
from .localization import Messages, clear_cache, get_locale, set_locale, set_locale_path
from .meta_rules import CustomMetaRule, StandardMetaRule
from .middlewares import HandleHttpExceptionsMiddleware, ValidationMiddleware
from .requirements import FieldRequirementConstraints, RequirementEngine, RequirementState
from .rule_parser import RuleParser
from .rule_registry import RuleRegistry, get_default_registry
from .uploaded_file import UploadError, UploadedFile
from .validator import Validator

__all__ = [
    "validate_query",
    "validate_request",
    "CompiledRules",
    "DataAccessor",
    "Messages",
    "clear_cache",
    "get_locale",
    "set_locale",
    "set_locale_path",
    "CustomMetaRule",
    "StandardMetaRule",
    "HandleHttpExceptionsMiddleware",
    "ValidationMiddleware",
    "FieldRequirementConstraints",
    "RequirementEngine",
    "RequirementState",
    "RuleParser",
    "RuleRegistry",
    "get_default_registry",
    "UploadError",
    "UploadedFile",
    "Validator",
]
