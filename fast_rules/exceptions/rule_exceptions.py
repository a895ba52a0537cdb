from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from fast_rules.core.requirements.requirement_engine import RequirementState


class ValidationRuleException(ValueError):
    """
    Raised by a single rule when a value does not satisfy it.

    This is intentionally different from `ValidationException`: rules raise
    this with their own (localized) message, and the `Validator` converts it
    to the caller-facing `ValidationException`, applying custom messages.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | int | None = None,
        rule: Optional[str] = None,
        requirement_state: Optional[RequirementState] = None,
    ):
        super().__init__(message)
        self.message = message
        self.field = field
        self.rule = rule
        # Set by the requirement engine for presence failures
        self.requirement_state = requirement_state


class RequiredRuleException(ValidationRuleException):
    """Raised when a field fails a `required` check."""


class RequiredWithoutRuleException(ValidationRuleException):
    """Raised when a field fails a `requiredWithout` check."""


class CustomRuleException(ValidationRuleException):
    """Raised when a user supplied predicate returns `False`."""


class FieldNotFoundException(LookupError):
    def __init__(self, message: str, *, field: str | int | None = None):
        super().__init__(message)
        self.message = message
        self.field = field
