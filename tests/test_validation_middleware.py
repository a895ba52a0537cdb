from __future__ import annotations

import pytest
from quart import Quart, jsonify, g

from fast_rules import DataAccessor, HandleHttpExceptionsMiddleware, ValidationMiddleware, middleware


def create_app():
    app = Quart(__name__)

    @app.route('/posts', methods=['POST'])
    @middleware(HandleHttpExceptionsMiddleware)
    @middleware(ValidationMiddleware({'title': ['required', 'string', 'maxLength:20']}))
    async def store_post(data: DataAccessor):
        return jsonify({'title': data.get_field('title')})

    @app.route('/posts', methods=['GET'])
    @middleware(HandleHttpExceptionsMiddleware)
    @middleware(ValidationMiddleware({'tag': 'required'}, {'tag.required': 'Pick a tag.'}))
    async def list_posts():
        return jsonify({'tag': g.validated_query.get_field('tag')})

    @app.route('/crash')
    @middleware(HandleHttpExceptionsMiddleware)
    @middleware(ValidationMiddleware({'q': 'positive'}))
    async def crash():
        return jsonify({})

    return app


@pytest.mark.asyncio
async def test_body_is_validated_and_injected():
    client = create_app().test_client()

    resp = await client.post('/posts', json={'title': 'Hello'})

    assert resp.status_code == 200
    assert await resp.get_json() == {'title': 'Hello'}


@pytest.mark.asyncio
async def test_body_failure_never_reaches_handler():
    client = create_app().test_client()

    resp = await client.post('/posts', json={'title': 'x' * 21})

    assert resp.status_code == 400
    assert (await resp.get_json())['message'] == "Field 'title' must have a maximum length of 20 characters."


@pytest.mark.asyncio
async def test_query_is_validated_for_get():
    client = create_app().test_client()

    resp = await client.get('/posts')
    assert resp.status_code == 400
    assert (await resp.get_json())['message'] == 'Pick a tag.'

    resp = await client.get('/posts', query_string={'tag': 'python'})
    assert resp.status_code == 200
    assert await resp.get_json() == {'tag': 'python'}


@pytest.mark.asyncio
async def test_configuration_errors_are_server_errors(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    client = create_app().test_client()

    resp = await client.get('/crash', query_string={'q': '1'})

    assert resp.status_code == 500
    assert (await resp.get_json())['error_type'] == 'server_error'


def test_middleware_decorator_rejects_non_middleware():
    with pytest.raises(TypeError):
        middleware(dict)(lambda: None)
