"""Collection of core middleware exports."""

from .handle_http_exceptions_middleware import HandleHttpExceptionsMiddleware
from .validation_middleware import ValidationMiddleware

__all__ = [
    "HandleHttpExceptionsMiddleware",
    "ValidationMiddleware",
]
