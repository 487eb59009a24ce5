"""Message Routes — HTTP surface for message CRUD.

Tests cover:
    - register → post → patch → get walkthrough
    - 400 mapping for blank / too long / unknown poster / missing message on update
    - timePostedEpoch accepted as any number, undecodable bodies answer 500
    - empty 200 bodies for absent GET and DELETE
    - listing all and by account
    - catch-all 500 never leaks internals
"""

import pytest
from httpx import ASGITransport, AsyncClient

from socialmedia.api.dependencies import get_message_service
from socialmedia.main import app


async def _register(client, username="ann", password="secret") -> int:
    res = await client.post("/register", json={"username": username, "password": password})
    return res.json()["accountId"]


async def _post(client, account_id, text="hi", epoch=1000):
    return await client.post(
        "/messages",
        json={"postedBy": account_id, "messageText": text, "timePostedEpoch": epoch},
    )


async def test_end_to_end_walkthrough(client):
    res = await client.post("/register", json={"username": "ann", "password": "secret"})
    assert res.status_code == 200
    account_id = res.json()["accountId"]

    res = await _post(client, account_id, "hi", 1000)
    assert res.status_code == 200
    message = res.json()
    assert message == {
        "messageId": message["messageId"],
        "postedBy": account_id,
        "messageText": "hi",
        "timePostedEpoch": 1000,
    }

    res = await client.patch(
        f"/messages/{message['messageId']}", json={"messageText": "hi there"},
    )
    assert res.status_code == 200
    assert res.json() == 1

    res = await client.get(f"/messages/{message['messageId']}")
    assert res.status_code == 200
    assert res.json() == {
        "messageId": message["messageId"],
        "postedBy": account_id,
        "messageText": "hi there",
        "timePostedEpoch": 1000,
    }


@pytest.mark.parametrize("text, code", [
    ("", "MESSAGE_TEXT_BLANK"),
    ("   ", "MESSAGE_TEXT_BLANK"),
    ("a" * 256, "MESSAGE_TEXT_TOO_LONG"),
])
async def test_create_invalid_text_is_400(client, text, code):
    account_id = await _register(client)
    res = await _post(client, account_id, text)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == code


async def test_create_unknown_poster_is_400(client):
    res = await _post(client, 999, "hi")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "USER_NOT_FOUND"


async def test_create_keeps_fractional_epoch(client):
    account_id = await _register(client)
    res = await _post(client, account_id, "hi", 1669947792.5)
    assert res.status_code == 200
    assert res.json()["timePostedEpoch"] == 1669947792.5

    res = await client.get(f"/messages/{res.json()['messageId']}")
    assert res.json()["timePostedEpoch"] == 1669947792.5


async def test_create_whole_epoch_echoed_as_integer(client):
    account_id = await _register(client)
    res = await _post(client, account_id, "hi", 1000)
    assert '"timePostedEpoch":1000}' in res.text


async def test_create_non_numeric_poster_is_generic_500(client):
    res = await client.post(
        "/messages", json={"postedBy": "someone", "messageText": "hi"},
    )
    assert res.status_code == 500
    assert res.json()["error"]["message"] == "An unexpected error occurred"


async def test_get_all_messages(client):
    account_id = await _register(client)
    await _post(client, account_id, "one")
    await _post(client, account_id, "two")
    res = await client.get("/messages")
    assert res.status_code == 200
    assert [m["messageText"] for m in res.json()] == ["one", "two"]


async def test_get_missing_message_is_empty_200(client):
    res = await client.get("/messages/404")
    assert res.status_code == 200
    assert res.content == b""


async def test_patch_missing_message_is_400(client):
    res = await client.patch("/messages/404", json={"messageText": "hello"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MESSAGE_NOT_FOUND"


async def test_patch_too_long_is_400(client):
    account_id = await _register(client)
    created = (await _post(client, account_id)).json()
    res = await client.patch(
        f"/messages/{created['messageId']}", json={"messageText": "a" * 256},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "MESSAGE_TEXT_TOO_LONG"


async def test_delete_existing_returns_one(client):
    account_id = await _register(client)
    created = (await _post(client, account_id)).json()
    res = await client.delete(f"/messages/{created['messageId']}")
    assert res.status_code == 200
    assert res.json() == 1

    res = await client.get(f"/messages/{created['messageId']}")
    assert res.content == b""


async def test_delete_missing_is_empty_200(client):
    res = await client.delete("/messages/404")
    assert res.status_code == 200
    assert res.content == b""


async def test_messages_by_account(client):
    ann = await _register(client, "ann")
    bob = await _register(client, "bob")
    await _post(client, ann, "from ann")
    await _post(client, bob, "from bob")

    res = await client.get(f"/accounts/{bob}/messages")
    assert res.status_code == 200
    assert [m["messageText"] for m in res.json()] == ["from bob"]


async def test_messages_by_account_without_messages_is_empty_list(client):
    res = await client.get("/accounts/77/messages")
    assert res.status_code == 200
    assert res.json() == []


async def test_unhandled_error_is_generic_500(client):
    class _BrokenService:
        async def get_all_messages(self):
            raise RuntimeError("connection string leaked here")

    app.dependency_overrides[get_message_service] = lambda: _BrokenService()
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/messages")

    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert body["error"]["message"] == "An unexpected error occurred"
    assert "leaked" not in res.text
