import pytest
from sqlalchemy import func, select

from todo_app.models.comment import Comment
from todo_app.models.reaction import Reaction

pytestmark = pytest.mark.anyio

MISSING_ID = "00000000-0000-4000-8000-000000000000"


async def test_add_reaction(client, make_user, make_todo):
    user_id, headers = await make_user()
    todo = await make_todo(headers)

    res = await client.post(f"/api/todos/{todo['id']}/reactions", json={"emoji": "👍"}, headers=headers)
    assert res.status_code == 201
    data = res.json()
    assert data["todoId"] == todo["id"]
    assert data["userId"] == user_id
    assert data["emoji"] == "👍"
    assert data["id"]
    assert data["createdAt"]


async def test_duplicate_reaction_conflicts(client, make_user, make_todo):
    _, headers = await make_user()
    todo = await make_todo(headers)
    url = f"/api/todos/{todo['id']}/reactions"

    assert (await client.post(url, json={"emoji": "👍"}, headers=headers)).status_code == 201
    res = await client.post(url, json={"emoji": "👍"}, headers=headers)
    assert res.status_code == 409
    assert res.json() == {"error": "Reaction already exists"}

    assert (await client.post(url, json={"emoji": "❤️"}, headers=headers)).status_code == 201
    res = await client.get(url)
    assert [r["emoji"] for r in res.json()] == ["👍", "❤️"]


async def test_same_emoji_from_different_users(client, make_user, make_todo):
    _, alice = await make_user("alice@example.com")
    _, bob = await make_user("bob@example.com")
    todo = await make_todo(alice)
    url = f"/api/todos/{todo['id']}/reactions"

    assert (await client.post(url, json={"emoji": "🎉"}, headers=alice)).status_code == 201
    assert (await client.post(url, json={"emoji": "🎉"}, headers=bob)).status_code == 201
    assert len((await client.get(url)).json()) == 2


async def test_remove_reaction(client, make_user, make_todo):
    _, headers = await make_user()
    todo = await make_todo(headers)
    url = f"/api/todos/{todo['id']}/reactions"
    await client.post(url, json={"emoji": "👍"}, headers=headers)

    res = await client.request("DELETE", url, json={"emoji": "👍"}, headers=headers)
    assert res.status_code == 204
    assert (await client.get(url)).json() == []

    res = await client.request("DELETE", url, json={"emoji": "👍"}, headers=headers)
    assert res.status_code == 404
    assert res.json() == {"error": "Reaction not found"}


async def test_reaction_mutations_require_token(client, make_user, make_todo):
    _, headers = await make_user()
    todo = await make_todo(headers)
    url = f"/api/todos/{todo['id']}/reactions"

    assert (await client.post(url, json={"emoji": "👍"})).status_code == 401
    assert (await client.request("DELETE", url, json={"emoji": "👍"})).status_code == 401
    res = await client.post(url, json={"emoji": "👍"}, headers={"Authorization": "Bearer forged"})
    assert res.status_code == 403


@pytest.mark.parametrize(
    "payload,message",
    [
        ({}, "Emoji is required"),
        ({"emoji": 1}, "Emoji must be a string"),
        ({"emoji": " "}, "Emoji is required"),
        ({"emoji": "x" * 33}, "Invalid emoji"),
    ],
)
async def test_reaction_validation(client, make_user, make_todo, payload, message):
    _, headers = await make_user()
    todo = await make_todo(headers)
    res = await client.post(f"/api/todos/{todo['id']}/reactions", json=payload, headers=headers)
    assert res.status_code == 400
    assert res.json() == {"error": message}


async def test_reactions_on_missing_todo(client, make_user):
    _, headers = await make_user()
    url = f"/api/todos/{MISSING_ID}/reactions"
    assert (await client.post(url, json={"emoji": "👍"}, headers=headers)).status_code == 404
    assert (await client.get(url)).json() == {"error": "Todo not found"}


async def test_deleting_todo_cascades_to_comments_and_reactions(client, db, make_user, make_todo):
    _, headers = await make_user()
    todo = await make_todo(headers)
    await client.post(f"/api/todos/{todo['id']}/comments", json={"content": "c"}, headers=headers)
    await client.post(f"/api/todos/{todo['id']}/reactions", json={"emoji": "👍"}, headers=headers)

    res = await client.delete(f"/api/todos/{todo['id']}", headers=headers)
    assert res.status_code == 200

    for model in (Comment, Reaction):
        res = await db.execute(select(func.count()).select_from(model).filter_by(todo_id=todo["id"]))
        assert res.scalar_one() == 0
