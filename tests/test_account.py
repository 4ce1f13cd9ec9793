import pytest

from factories import DEFAULT_PASSWORD


@pytest.mark.asyncio
async def test_change_password_requires_auth(client):
    res = await client.post(
        "/api/account/change-password",
        json={"old_password": "whatever1", "new_password": "whatever2"},
    )
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_change_password_keeps_current_session_only(client, make_user, login):
    user = await make_user("student")
    other_headers = await login(user)
    headers = await login(user)

    res = await client.post(
        "/api/account/change-password",
        json={"old_password": DEFAULT_PASSWORD, "new_password": "ChangedPass99"},
        headers=headers,
    )
    assert res.status_code == 200

    assert (await client.get("/api/auth/session", headers=headers)).status_code == 200
    assert (await client.get("/api/auth/session", headers=other_headers)).status_code == 401

    await login(user, password="ChangedPass99")


@pytest.mark.asyncio
async def test_change_password_rejects_wrong_or_same(client, make_user, login):
    user = await make_user("student")
    headers = await login(user)

    res = await client.post(
        "/api/account/change-password",
        json={"old_password": "not-my-password", "new_password": "ChangedPass99"},
        headers=headers,
    )
    assert res.status_code == 400

    res = await client.post(
        "/api/account/change-password",
        json={"old_password": DEFAULT_PASSWORD, "new_password": DEFAULT_PASSWORD},
        headers=headers,
    )
    assert res.status_code == 400
