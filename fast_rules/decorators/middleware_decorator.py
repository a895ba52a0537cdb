from typing import Type, Callable, Union
import inspect
from fast_rules.contracts.middleware import Middleware


def middleware(middleware_class_or_instance: Union[Type[Middleware], Middleware]):
    """
    Decorator to apply a middleware class or instance to a route handler

    Usage:
        @middleware(HandleHttpExceptionsMiddleware)  # Class
        async def store():
            ...

        @middleware(ValidationMiddleware({'email': ['required', 'email']}))  # Instance
        async def store(data: DataAccessor):
            ...
    """
    def decorator(func: Callable) -> Callable:
        if inspect.isclass(middleware_class_or_instance):
            if not issubclass(middleware_class_or_instance, Middleware):
                raise TypeError(f"{middleware_class_or_instance} must inherit from Middleware")
            middleware_instance = middleware_class_or_instance()
        else:
            if not isinstance(middleware_class_or_instance, Middleware):
                raise TypeError(f"{middleware_class_or_instance} must be an instance of Middleware")
            middleware_instance = middleware_class_or_instance

        return middleware_instance(func)

    return decorator
