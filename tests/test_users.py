import pytest
from unittest.mock import patch

from eportal.services import rbac_service
from factories import DEFAULT_PASSWORD, profile


@pytest.mark.asyncio
async def test_admin_creates_user_with_default_role(client, as_role):
    _, headers = await as_role("admin")
    payload = {**profile(email="new.lecturer@eportal.edu.ng"), "password": DEFAULT_PASSWORD, "user_type": "lecturer", "staff_id": "STF/001"}

    with patch("eportal.api.endpoints.users.send_welcome_email") as mock_send:
        res = await client.post("/api/users", json=payload, headers=headers)

    assert res.status_code == 201
    user = res.json()
    assert user["user_type"] == "lecturer"
    assert user["staff_id"] == "STF/001"
    assert "password_hash" not in user
    mock_send.assert_called_once()

    res = await client.get(f"/api/users/{user['id']}/roles", headers=headers)
    assert [r["name"] for r in res.json()] == ["lecturer"]


@pytest.mark.asyncio
async def test_create_user_with_explicit_roles(client, as_role):
    _, headers = await as_role("admin")
    roles = {r["name"]: r["id"] for r in (await client.get("/api/roles", headers=headers)).json()}

    payload = {
        **profile(),
        "password": DEFAULT_PASSWORD,
        "user_type": "lecturer",
        "role_ids": [roles["lecturer"], roles["hod"]],
    }
    with patch("eportal.api.endpoints.users.send_welcome_email"):
        res = await client.post("/api/users", json=payload, headers=headers)
    assert res.status_code == 201

    res = await client.get(f"/api/users/{res.json()['id']}/roles", headers=headers)
    assert sorted(r["name"] for r in res.json()) == ["hod", "lecturer"]


@pytest.mark.asyncio
async def test_create_user_duplicate_email(client, as_role, make_user):
    _, headers = await as_role("admin")
    existing = await make_user("student")

    payload = {**profile(email=existing.email), "password": DEFAULT_PASSWORD, "user_type": "student"}
    with patch("eportal.api.endpoints.users.send_welcome_email"):
        res = await client.post("/api/users", json=payload, headers=headers)
    assert res.status_code == 400
    assert res.json()["detail"] == "User with this email already exists"


@pytest.mark.asyncio
async def test_registrar_can_create_users_but_student_cannot(client, as_role):
    _, registrar_headers = await as_role("registrar")
    _, student_headers = await as_role("student")
    payload = {**profile(), "password": DEFAULT_PASSWORD, "user_type": "student"}

    with patch("eportal.api.endpoints.users.send_welcome_email"):
        res = await client.post("/api/users", json=payload, headers=student_headers)
        assert res.status_code == 403

        res = await client.post("/api/users", json=payload, headers=registrar_headers)
        assert res.status_code == 201


@pytest.mark.asyncio
async def test_list_and_filter_users(client, as_role, make_user):
    _, headers = await as_role("admin")
    await make_user("student")
    await make_user("student")
    await make_user("bursar")

    res = await client.get("/api/users", headers=headers)
    assert res.status_code == 200
    assert len(res.json()) == 4

    res = await client.get("/api/users/by-type/student", headers=headers)
    assert {u["user_type"] for u in res.json()} == {"student"}
    assert len(res.json()) == 2

    res = await client.get("/api/users?limit=1&offset=1", headers=headers)
    assert len(res.json()) == 1


@pytest.mark.asyncio
async def test_update_user_recomputes_name(client, as_role, make_user):
    _, headers = await as_role("admin")
    user = await make_user("student")

    res = await client.put(
        f"/api/users/{user.id}",
        json={"middle_name": "Ngozi", "current_level": 200},
        headers=headers,
    )
    assert res.status_code == 200
    assert res.json()["name"] == "Ada Ngozi Obi"
    assert res.json()["current_level"] == 200


@pytest.mark.asyncio
async def test_delete_user_removes_sessions(client, as_role, make_user, login):
    _, headers = await as_role("admin")
    user = await make_user("student")
    user_headers = await login(user)

    res = await client.delete(f"/api/users/{user.id}", headers=headers)
    assert res.status_code == 200

    assert (await client.get(f"/api/users/{user.id}", headers=headers)).status_code == 404
    assert (await client.get("/api/auth/session", headers=user_headers)).status_code == 401


@pytest.mark.asyncio
async def test_cannot_delete_self(client, as_role):
    admin, headers = await as_role("admin")
    res = await client.delete(f"/api/users/{admin.id}", headers=headers)
    assert res.status_code == 400


@pytest.mark.asyncio
async def test_user_writes_are_audited(client, as_role, make_user):
    admin, headers = await as_role("admin")
    user = await make_user("student")

    await client.put(f"/api/users/{user.id}", json={"phone_number": "08099999999"}, headers=headers)

    res = await client.get("/api/audit-logs", params={"entity": "users", "action": "update"}, headers=headers)
    assert res.status_code == 200
    entry = res.json()[0]
    assert entry["entity_id"] == str(user.id)
    assert entry["user_id"] == str(admin.id)
    assert entry["old_values"]["phone_number"] == "08030000000"
    assert entry["new_values"]["phone_number"] == "08099999999"
    assert "password_hash" not in entry["new_values"]


@pytest.mark.asyncio
async def test_hod_cannot_grant_themselves_admin(client, as_role, session):
    hod, headers = await as_role("hod")
    admin_role = await rbac_service.get_role_by_name(session, "admin")

    res = await client.put(f"/api/users/{hod.id}", json={"role_ids": [str(admin_role.id)]}, headers=headers)
    assert res.status_code == 403

    res = await client.put(f"/api/users/{hod.id}", json={"user_type": "admin"}, headers=headers)
    assert res.status_code == 403

    # moving to any other type changes the default role too
    res = await client.put(f"/api/users/{hod.id}", json={"user_type": "dean"}, headers=headers)
    assert res.status_code == 403

    assert (await client.get("/api/audit-logs", headers=headers)).status_code == 403
    res = await client.get(f"/api/users/{hod.id}", headers=headers)
    assert res.json()["user_type"] == "hod"
    assert res.json()["is_admin"] is False

    # ordinary profile edits still go through
    res = await client.put(f"/api/users/{hod.id}", json={"phone_number": "08030000000"}, headers=headers)
    assert res.status_code == 200


@pytest.mark.asyncio
async def test_registrar_cannot_create_admins_or_pick_roles(client, as_role, session):
    _, headers = await as_role("registrar")
    registrar_role = await rbac_service.get_role_by_name(session, "registrar")

    with patch("eportal.api.endpoints.users.send_welcome_email"):
        res = await client.post(
            "/api/users", json={**profile(), "password": DEFAULT_PASSWORD, "user_type": "admin"}, headers=headers
        )
        assert res.status_code == 403

        res = await client.post(
            "/api/users",
            json={**profile(), "password": DEFAULT_PASSWORD, "user_type": "lecturer", "role_ids": [str(registrar_role.id)]},
            headers=headers,
        )
        assert res.status_code == 403

        res = await client.post(
            "/api/users", json={**profile(), "password": DEFAULT_PASSWORD, "user_type": "lecturer"}, headers=headers
        )
        assert res.status_code == 201


@pytest.mark.asyncio
async def test_admin_can_change_user_type(client, as_role, make_user):
    _, headers = await as_role("admin")
    lecturer = await make_user("lecturer")

    res = await client.put(f"/api/users/{lecturer.id}", json={"user_type": "admin"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["is_admin"] is True
