import logging
import os
from typing import Any, Callable, Awaitable

from fast_rules.contracts.middleware import Middleware
from fast_rules.exceptions import AppException, HttpException, ServerErrorException, ValidationException

logger = logging.getLogger(__name__)


def _is_debug() -> bool:
    return os.getenv("ENV") == "debug"


class HandleHttpExceptionsMiddleware(Middleware):
    """
    Turns exceptions raised by a Quart handler into JSON error responses.

    Rejected input answers 400 in every environment. Anything else is logged;
    with `ENV=debug` it is re-raised so the traceback reaches the developer.
    A misdeclared rule is a bug, so it ends up as a 500.
    """

    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        try:
            return await next_handler(*args, **kwargs)
        except ValidationException as e:
            logger.info(f"Request rejected on field '{e.field}': {e.message}")
            return e.to_response()
        except HttpException as e:
            return e.to_response()
        except AppException as e:
            logger.exception("Application exception while handling request", exc_info=e)
            if _is_debug():
                raise
            return e.to_response()
        except Exception as e:
            logger.exception("Unhandled exception while handling request", exc_info=e)
            if _is_debug():
                raise
            return ServerErrorException(error_type="server_error").to_response()
