import pytest
from quart import Quart, jsonify, g

from fast_rules import HandleHttpExceptionsMiddleware, Validator, middleware, validate_request

user_validator = Validator(
    {
        'name': ['required', 'string', 'maxLength:50'],
        'email': ['required', 'email'],
        'age': ['nullable', 'integer:strict', 'min:18'],
    },
    {'email.required': 'Tell us your email.'},
)


def create_app():
    app = Quart(__name__)

    @app.route('/users', methods=['POST'])
    @middleware(HandleHttpExceptionsMiddleware)
    async def store_user():
        await validate_request(user_validator)
        return jsonify(g.validated.data)

    @app.route('/notes', methods=['POST'])
    @middleware(HandleHttpExceptionsMiddleware)
    async def store_note():
        validated = await validate_request({'body': ['required', 'string', 'minLength:1']})
        return jsonify({'body': validated.get_field('body')})

    return app


@pytest.mark.asyncio
async def test_validate_request_success(sample_user):
    client = create_app().test_client()
    payload = {'name': sample_user['name'][:50], 'email': sample_user['email'], 'age': None}

    resp = await client.post('/users', json=payload)

    assert resp.status_code == 200
    assert await resp.get_json() == payload


@pytest.mark.asyncio
async def test_validate_request_failure_is_a_bad_request(sample_user):
    client = create_app().test_client()

    resp = await client.post('/users', json={'name': sample_user['name']})

    assert resp.status_code == 400
    data = await resp.get_json()
    assert data == {
        'error_type': 'invalid_request',
        'message': 'Tell us your email.',
        'data': {'field': 'email', 'rule': 'required'},
    }


@pytest.mark.asyncio
async def test_validate_request_strict_integer():
    client = create_app().test_client()

    resp = await client.post('/users', json={'name': 'Jane', 'email': 'jane@gmail.com', 'age': '30'})

    assert resp.status_code == 400
    assert (await resp.get_json())['message'] == "Field 'age' must be an integer."


@pytest.mark.asyncio
async def test_validate_request_without_json_body():
    client = create_app().test_client()

    resp = await client.post('/notes', data='plain text')

    assert resp.status_code == 400
    assert (await resp.get_json())['message'] == "Required field 'body' is missing."


@pytest.mark.asyncio
async def test_validate_request_from_declarations():
    client = create_app().test_client()

    resp = await client.post('/notes', json={'body': 'hello'})

    assert resp.status_code == 200
    assert await resp.get_json() == {'body': 'hello'}
