from typing import Mapping, Optional, Union

from quart import g, request

from fast_rules.core.compiled_rules import RuleDeclarations
from fast_rules.core.data_accessor import DataAccessor
from fast_rules.core.validator import Validator


def _as_validator(validator: Union[Validator, RuleDeclarations], custom_messages: Optional[Mapping[str, str]]) -> Validator:
    if isinstance(validator, Validator):
        return validator
    return Validator(validator, custom_messages)


async def validate_request(validator: Union[Validator, RuleDeclarations], custom_messages: Optional[Mapping[str, str]] = None) -> DataAccessor:
    """Validate the JSON request body.

    Args:
        validator: A `Validator`, or rule declarations to build one from.
        custom_messages: Custom messages, used only when `validator` is given as declarations.

    Returns:
        The accessor over the validated body, also stored in `g.validated`.

    Raises:
        ValidationException: If the request body is invalid.
    """
    json_data = await request.get_json(silent=True)
    if json_data is None:
        json_data = {}
    validated = _as_validator(validator, custom_messages).validate(json_data)
    g.validated = validated
    return validated


def validate_query(validator: Union[Validator, RuleDeclarations], custom_messages: Optional[Mapping[str, str]] = None) -> DataAccessor:
    """Validate the request query parameters.

    Stores the accessor in `g.validated_query` and returns it.
    """
    # Convert MultiDict to a plain dict (first value wins per key)
    query_data = dict(request.args)
    validated = _as_validator(validator, custom_messages).validate(query_data)
    g.validated_query = validated
    return validated
