from __future__ import annotations

from inspect import signature
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from quart import request

from fast_rules.contracts.middleware import Middleware
from fast_rules.core.api import validate_query, validate_request
from fast_rules.core.compiled_rules import RuleDeclarations
from fast_rules.core.data_accessor import DataAccessor
from fast_rules.core.validator import Validator


class ValidationMiddleware(Middleware):
    """Validate the request before the handler runs.

    - For HTTP GET/DELETE/HEAD/OPTIONS the query string is validated
      (`validate_query`), otherwise the JSON body (`validate_request`).
    - If the handler declares a parameter annotated with `DataAccessor`, the
      validated accessor is injected into it. Either way it is available as
      `g.validated` / `g.validated_query`.

    The validator is compiled once, when the middleware is created.
    """

    QUERY_METHODS = frozenset({"GET", "DELETE", "HEAD", "OPTIONS"})

    def __init__(self, validator: Union[Validator, RuleDeclarations], custom_messages: Optional[Mapping[str, str]] = None):
        if not isinstance(validator, Validator):
            validator = Validator(validator, custom_messages)
        self.validator = validator

    async def handle(self, next_handler: Callable[..., Awaitable[Any]], *args, **kwargs) -> Any:
        if request.method.upper() in self.QUERY_METHODS:
            validated = validate_query(self.validator)
        else:
            validated = await validate_request(self.validator)

        param_name = self._accessor_param_name(next_handler)
        if param_name is None:
            return await next_handler(*args, **kwargs)

        new_kwargs = dict(kwargs)
        new_kwargs[param_name] = validated
        return await next_handler(*args, **new_kwargs)

    @staticmethod
    def _accessor_param_name(handler: Callable[..., Any]) -> Optional[str]:
        for name, param in signature(handler).parameters.items():
            ann = param.annotation
            if ann is DataAccessor or ann == 'DataAccessor':
                return name
        return None
