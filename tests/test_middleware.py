from datetime import timedelta

import pytest

from todo_app.models.base import new_id
from todo_app.security import create_access_token

pytestmark = pytest.mark.anyio


async def test_missing_token_is_401(client):
    res = await client.get("/api/todos")
    assert res.status_code == 401
    assert res.json() == {"error": "Access token required"}


async def test_non_bearer_scheme_is_401(client):
    res = await client.get("/api/todos", headers={"Authorization": "Basic abc"})
    assert res.status_code == 401
    assert res.json() == {"error": "Access token required"}


async def test_garbage_token_is_403(client):
    res = await client.get("/api/todos", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 403
    assert res.json() == {"error": "Invalid or expired token"}


async def test_token_for_unknown_user_is_403(client):
    token = create_access_token(new_id())
    res = await client.get("/api/todos", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 403
    assert res.json() == {"error": "Invalid or expired token"}


async def test_expired_token_is_403(client, make_user):
    user_id, _ = await make_user()
    token = create_access_token(user_id, expires_delta=timedelta(seconds=-5))
    res = await client.get("/api/todos", headers={"Authorization": f"Bearer {token}"})
    assert res.status_code == 403


async def test_valid_token_reaches_route(client, make_user):
    _, headers = await make_user()
    res = await client.get("/api/todos", headers=headers)
    assert res.status_code == 200
    assert res.json() == []
