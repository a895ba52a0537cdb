import pytest
from quart import Quart

from fast_rules.exceptions import (
    AppException,
    BadRequestException,
    HttpException,
    ServerErrorException,
    ValidationException,
)
from fast_rules.utils.serialisation import get_exception_error_type


def test_validation_exception_carries_bad_request():
    error = ValidationException("Required field 'email' is missing.", field='email', rule='required')

    assert isinstance(error, AppException)
    assert error.http_status_code == 400
    assert error.error_type == 'invalid_request'
    assert error.data == {'field': 'email', 'rule': 'required'}


def test_error_type_is_inferred_from_class_name():
    assert get_exception_error_type(BadRequestException()) == 'bad_request'
    assert BadRequestException().status_code == 400
    assert ServerErrorException().error_type == 'server_error'


@pytest.mark.asyncio
async def test_validation_exception_to_response():
    app = Quart(__name__)
    error = ValidationException("Field 'age' must be an integer.", field='age', rule='integer')

    async with app.app_context():
        response, status_code = error.to_response()
        body = await response.get_json()

    assert status_code == 400
    assert body == {
        'error_type': 'invalid_request',
        'message': "Field 'age' must be an integer.",
        'data': {'field': 'age', 'rule': 'integer'},
    }


def test_to_http_exception():
    http_error = ValidationException('Nope.').to_http_exception()

    assert isinstance(http_error, HttpException)
    assert http_error.status_code == 400
    assert http_error.message == 'Nope.'
    assert http_error.dict()['data'] is None
