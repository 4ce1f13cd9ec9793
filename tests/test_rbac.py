import pytest

from eportal.core.constants import build_permission_catalogue
from eportal.services import rbac_service

FACULTY = {"name": "Faculty of Science", "code": "SCI"}


@pytest.mark.asyncio
async def test_protected_route_requires_session(client):
    res = await client.get("/api/faculties")
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_missing_permission_is_forbidden(client, as_role):
    _, headers = await as_role("student")

    res = await client.post("/api/faculties", json=FACULTY, headers=headers)
    assert res.status_code == 403
    assert res.json()["detail"] == "Insufficient permissions: create:faculties"

    # reading is granted
    res = await client.get("/api/faculties", headers=headers)
    assert res.status_code == 200


@pytest.mark.asyncio
async def test_admin_bypasses_every_check(client, as_role):
    _, headers = await as_role("admin")

    res = await client.post("/api/faculties", json=FACULTY, headers=headers)
    assert res.status_code == 201
    faculty_id = res.json()["id"]

    res = await client.put(f"/api/faculties/{faculty_id}", json={"description": "Sciences"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["description"] == "Sciences"
    assert res.json()["code"] == "SCI"

    res = await client.delete(f"/api/faculties/{faculty_id}", headers=headers)
    assert res.json() == {"success": True}

    res = await client.get(f"/api/faculties/{faculty_id}", headers=headers)
    assert res.status_code == 404
    assert res.json()["detail"] == "Faculty not found"


@pytest.mark.asyncio
async def test_has_permission_follows_role_grants(session, make_user):
    lecturer = await make_user("lecturer")
    admin = await make_user("admin")

    assert await rbac_service.has_permission(session, lecturer.id, "upload", "results")
    assert not await rbac_service.has_permission(session, lecturer.id, "approve", "results")
    assert await rbac_service.has_permission(session, admin.id, "delete", "anything")

    permissions = await rbac_service.get_user_permissions(session, admin.id)
    assert len(permissions) == len(build_permission_catalogue())


@pytest.mark.asyncio
async def test_user_without_roles_has_no_permissions(session, make_user):
    user = await make_user("student")
    await rbac_service.set_user_roles(session, user.id, [])
    await session.commit()

    assert await rbac_service.get_user_permissions(session, user.id) == set()
    assert not await rbac_service.has_permission(session, user.id, "view", "dashboard")


@pytest.mark.asyncio
async def test_custom_role_grants_apply_immediately(client, as_role, make_user, login):
    _, admin_headers = await as_role("admin")
    student = await make_user("student")
    student_headers = await login(student)

    res = await client.get("/api/permissions", headers=admin_headers)
    catalogue = {f"{p['action']}:{p['resource']}": p["id"] for p in res.json()}

    res = await client.post(
        "/api/roles",
        json={"name": "Hostel-Warden", "description": "Runs a hall", "permission_ids": [catalogue["create:hostels"]]},
        headers=admin_headers,
    )
    assert res.status_code == 201
    role = res.json()
    assert role["name"] == "hostel-warden"
    assert [p["resource"] for p in role["permissions"]] == ["hostels"]

    hostel = {"name": "Queen Amina Hall", "hostel_type": "Female", "total_rooms": 50, "total_beds": 200, "available_beds": 200}
    res = await client.post("/api/hostels", json=hostel, headers=student_headers)
    assert res.status_code == 403

    # add the new role next to the student one
    res = await client.get(f"/api/users/{student.id}/roles", headers=admin_headers)
    role_ids = [r["id"] for r in res.json()] + [role["id"]]
    res = await client.put(f"/api/users/{student.id}", json={"role_ids": role_ids}, headers=admin_headers)
    assert res.status_code == 200

    res = await client.post("/api/hostels", json=hostel, headers=student_headers)
    assert res.status_code == 201


@pytest.mark.asyncio
async def test_role_permissions_replace_and_delete(client, as_role):
    _, headers = await as_role("admin")

    res = await client.post("/api/roles", json={"name": "auditor"}, headers=headers)
    role_id = res.json()["id"]

    res = await client.get("/api/permissions", headers=headers)
    view_logs = next(p["id"] for p in res.json() if p["action"] == "view" and p["resource"] == "audit_logs")

    res = await client.put(f"/api/roles/{role_id}/permissions", json={"permission_ids": [view_logs]}, headers=headers)
    assert res.status_code == 200
    assert len(res.json()["permissions"]) == 1

    res = await client.post("/api/roles", json={"name": "auditor"}, headers=headers)
    assert res.status_code == 400

    res = await client.delete(f"/api/roles/{role_id}", headers=headers)
    assert res.status_code == 200

    res = await client.delete(f"/api/roles/{role_id}", headers=headers)
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_system_roles_cannot_be_deleted(client, as_role):
    _, headers = await as_role("admin")

    res = await client.get("/api/roles", headers=headers)
    student_role = next(r for r in res.json() if r["name"] == "student")
    assert student_role["is_system_role"] is True

    res = await client.delete(f"/api/roles/{student_role['id']}", headers=headers)
    assert res.status_code == 400
    assert res.json()["detail"] == "System roles cannot be deleted"


@pytest.mark.asyncio
async def test_non_admin_cannot_manage_roles(client, as_role):
    _, headers = await as_role("registrar")
    res = await client.post("/api/roles", json={"name": "sneaky"}, headers=headers)
    assert res.status_code == 403
