import pytest


async def notify(client, headers, user_id, title="Result published"):
    res = await client.post(
        "/api/notifications",
        json={"user_id": str(user_id), "title": title, "message": "Check your portal", "type": "info"},
        headers=headers,
    )
    assert res.status_code == 201, res.text
    return res.json()


@pytest.mark.asyncio
async def test_mark_as_read_stamps_read_at(client, as_role, make_user, login):
    _, admin_headers = await as_role("admin")
    student = await make_user("student")
    headers = await login(student)

    notification = await notify(client, admin_headers, student.id)
    assert notification["is_read"] is False

    res = await client.post(f"/api/notifications/{notification['id']}/read", headers=headers)
    assert res.status_code == 200
    assert res.json()["is_read"] is True
    assert res.json()["read_at"] is not None


@pytest.mark.asyncio
async def test_cannot_touch_someone_elses_notification(client, as_role, make_user, login):
    _, admin_headers = await as_role("admin")
    student = await make_user("student")
    other = await make_user("student")
    headers = await login(student)

    notification = await notify(client, admin_headers, other.id)

    res = await client.post(f"/api/notifications/{notification['id']}/read", headers=headers)
    assert res.status_code == 404

    res = await client.put(f"/api/notifications/{notification['id']}", json={"is_read": True}, headers=headers)
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_mark_all_read_only_touches_callers_inbox(client, as_role, make_user, login):
    _, admin_headers = await as_role("admin")
    student = await make_user("student")
    other = await make_user("student")
    headers = await login(student)
    other_headers = await login(other)

    for i in range(3):
        await notify(client, admin_headers, student.id, title=f"Notice {i}")
    await notify(client, admin_headers, other.id)

    res = await client.post("/api/notifications/mark-all-read", headers=headers)
    assert res.json() == {"success": True, "updated": 3}

    res = await client.get(f"/api/notifications/by-user/{student.id}", headers=headers)
    assert all(n["is_read"] for n in res.json())

    res = await client.get("/api/notifications", headers=other_headers)
    assert [n["is_read"] for n in res.json()] == [False]

    # nothing left to update
    res = await client.post("/api/notifications/mark-all-read", headers=headers)
    assert res.json()["updated"] == 0


@pytest.mark.asyncio
async def test_students_cannot_send_notifications(client, as_role):
    student, headers = await as_role("student")
    res = await client.post(
        "/api/notifications",
        json={"user_id": str(student.id), "title": "Hi", "message": "Spam"},
        headers=headers,
    )
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_announcements_default_publisher_and_pinned_first(client, as_role):
    dean, headers = await as_role("dean")

    for title, pinned in (("Exam timetable", False), ("Matriculation", True)):
        res = await client.post(
            "/api/announcements",
            json={"title": title, "content": "Details inside", "category": "Academic", "is_pinned": pinned},
            headers=headers,
        )
        assert res.status_code == 201
        assert res.json()["published_by"] == str(dean.id)

    res = await client.get("/api/announcements", headers=headers)
    assert [a["title"] for a in res.json()] == ["Matriculation", "Exam timetable"]
