from abc import ABC, abstractmethod
from functools import wraps
from typing import Callable, Any, Awaitable


class Middleware(ABC):
    """Wraps an async Quart route handler."""

    @abstractmethod
    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        """
        Run around the wrapped handler.

        Args:
            next_handler: The handler (or next middleware) to delegate to
            *args, **kwargs: Route arguments for the handler

        Returns:
            The response, either produced here or by `next_handler`
        """
        pass

    def __call__(self, func: Callable[..., Awaitable[Any]]) -> Callable[..., Awaitable[Any]]:
        """Apply the middleware as a decorator"""
        @wraps(func)
        async def wrapper(*args, **kwargs):
            return await self.handle(func, *args, **kwargs)
        return wrapper
