from typing import Optional

from fast_rules.exceptions.http_exceptions import HttpException
from fast_rules.utils.serialisation import get_exception_error_type


class AppException(Exception):
    def __init__(self,
        message: str,
        *,
        http_status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        data: Optional[dict] = None
    ):
        """
        Universal exception, which can be converted to a HTTP response, if caught by the handle_http_exceptions_middleware.

        Args:
            message: The error message.
            http_status_code: The HTTP status code to return.
            error_type: The error type to return (if not provided, it will be inferred from the exception class name).
            data: The data to return.
        """
        self.message = message
        self.http_status_code = http_status_code
        self.error_type = error_type or get_exception_error_type(self)
        self.data = data
        super().__init__(message)

    def to_http_exception(self):
        return HttpException(status_code=self.http_status_code, error_type=self.error_type, message=self.message, data=self.data)

    def to_response(self):
        return self.to_http_exception().to_response()


class ValidationException(AppException):
    """
    The single error surfaced to callers of `Validator.validate`.

    Always carries HTTP 400 (Bad Request), regardless of whether the message
    came from a built-in rule, a requirement rule or a custom message override.
    The rule-level exception that triggered it is available as `__cause__`.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | int | None = None,
        rule: Optional[str] = None,
        requirement_states: Optional[dict] = None,
    ):
        self.field = field
        self.rule = rule
        # field -> RequirementState when validation stopped; unreached fields stay UNEVALUATED
        self.requirement_states = requirement_states or {}
        data = None
        if field is not None:
            data = {"field": field, "rule": rule}
        super().__init__(message, http_status_code=400, error_type="invalid_request", data=data)


class TranslationNotFoundException(LookupError):
    def __init__(self, key: str, locale: Optional[str] = None):
        self.key = key
        self.locale = locale
        message = f"[TRANSLATION] Translation `{key}` not found"
        if locale:
            message += f" for locale `{locale}`"
        super().__init__(message + ".")


class EnvInvalidException(ValueError):
    def __init__(self, env_name: str, value: str = None, supported_values: list[str] = None):
        message = f"[ENV INVALID] Invalid environment variable: `{env_name}`"
        if value:
            message += f" (value: `{value}`) "
        if supported_values:
            message += f" (supported values: {', '.join(supported_values)})"
        super().__init__(message)
