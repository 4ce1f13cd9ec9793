import uuid

import pytest


@pytest.mark.asyncio
async def test_clearance_status_follows_office_flags(client, as_role, make_user, login):
    _, admin_headers = await as_role("admin")
    bursar, bursar_headers = await as_role("bursar")
    _, registrar_headers = await as_role("registrar")
    student = await make_user("student")
    student_headers = await login(student)

    res = await client.post(
        "/api/clearances",
        json={"student_id": str(student.id), "session_id": str(uuid.uuid4()), "clearance_type": "Final Year"},
        headers=admin_headers,
    )
    assert res.status_code == 201
    clearance = res.json()
    assert clearance["status"] == "Pending"

    res = await client.put(
        f"/api/clearances/{clearance['id']}", json={"bursary_cleared": True}, headers=bursar_headers
    )
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Partial"
    assert body["bursary_cleared_by"] == str(bursar.id)
    assert body["bursary_cleared_at"] is not None
    assert body["completed_at"] is None

    res = await client.put(
        f"/api/clearances/{clearance['id']}",
        json={
            "library_cleared": True,
            "hostel_cleared": True,
            "department_cleared": True,
            "faculty_cleared": True,
        },
        headers=registrar_headers,
    )
    assert res.json()["status"] == "Completed"
    assert res.json()["completed_at"] is not None

    # withdrawing one office drops it back
    res = await client.put(
        f"/api/clearances/{clearance['id']}",
        json={"library_cleared": False, "library_remarks": "Overdue book"},
        headers=registrar_headers,
    )
    assert res.json()["status"] == "Partial"
    assert res.json()["library_cleared_by"] is None

    res = await client.get("/api/clearances", headers=student_headers)
    assert [c["id"] for c in res.json()] == [clearance["id"]]

    res = await client.put(
        f"/api/clearances/{clearance['id']}", json={"library_cleared": True}, headers=student_headers
    )
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_room_occupancy_cannot_exceed_capacity(client, as_role):
    _, headers = await as_role("admin")

    hostel = (await client.post(
        "/api/hostels",
        json={"name": "Queen Amina Hall", "hostel_type": "Female", "total_rooms": 10, "total_beds": 40, "available_beds": 40},
        headers=headers,
    )).json()

    res = await client.post(
        "/api/hostel-rooms",
        json={"hostel_id": hostel["id"], "room_number": "A101", "capacity": 4, "occupied_beds": 5},
        headers=headers,
    )
    assert res.status_code == 400

    res = await client.post(
        "/api/hostel-rooms",
        json={"hostel_id": hostel["id"], "room_number": "A101", "capacity": 4, "facilities": ["Fan", "Wardrobe"]},
        headers=headers,
    )
    assert res.status_code == 201
    room = res.json()
    assert room["occupied_beds"] == 0

    res = await client.put(f"/api/hostel-rooms/{room['id']}", json={"occupied_beds": 4}, headers=headers)
    assert res.status_code == 200

    res = await client.put(f"/api/hostel-rooms/{room['id']}", json={"capacity": 3}, headers=headers)
    assert res.status_code == 400

    res = await client.put(f"/api/hostel-rooms/{room['id']}", json={"capacity": 0}, headers=headers)
    assert res.status_code == 422

    res = await client.get(f"/api/hostel-rooms/{room['id']}", headers=headers)
    assert res.json()["capacity"] == 4


@pytest.mark.asyncio
async def test_exam_must_end_after_it_starts(client, as_role):
    _, headers = await as_role("dean")
    payload = {
        "course_id": str(uuid.uuid4()),
        "session_id": str(uuid.uuid4()),
        "semester": "First",
        "exam_date": "2026-01-20",
        "start_time": "09:00",
        "end_time": "09:00",
        "duration": 120,
        "venue": "Main Hall",
        "exam_type": "Written",
        "max_score": "70",
    }

    res = await client.post("/api/examinations", json=payload, headers=headers)
    assert res.status_code == 400

    payload["end_time"] = "11:00"
    res = await client.post("/api/examinations", json=payload, headers=headers)
    assert res.status_code == 201


@pytest.mark.asyncio
async def test_system_settings_are_type_checked(client, as_role):
    admin, headers = await as_role("admin")

    res = await client.post(
        "/api/system-settings",
        json={"setting_key": "max_credit_units", "setting_value": "lots", "setting_type": "number"},
        headers=headers,
    )
    assert res.status_code == 400

    res = await client.post(
        "/api/system-settings",
        json={"setting_key": "max_credit_units", "setting_value": "24", "setting_type": "number", "is_public": True},
        headers=headers,
    )
    assert res.status_code == 201
    assert res.json()["updated_by"] == str(admin.id)
    setting_id = res.json()["id"]

    res = await client.post(
        "/api/system-settings",
        json={"setting_key": "smtp_relay", "setting_value": "internal", "category": "mail"},
        headers=headers,
    )
    assert res.status_code == 201

    res = await client.put(f"/api/system-settings/{setting_id}", json={"setting_value": "many"}, headers=headers)
    assert res.status_code == 400

    res = await client.put(f"/api/system-settings/{setting_id}", json={"setting_value": ""}, headers=headers)
    assert res.status_code == 400

    _, student_headers = await as_role("student")
    res = await client.get("/api/system-settings/public", headers=student_headers)
    assert [s["setting_key"] for s in res.json()] == ["max_credit_units"]

    res = await client.get("/api/system-settings", headers=student_headers)
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_petition_assignment_starts_review(client, as_role, make_user, login):
    hod, hod_headers = await as_role("hod")
    student = await make_user("student")
    headers = await login(student)

    res = await client.post(
        "/api/petitions",
        json={"petition_type": "Result", "subject": "Missing CA score", "description": "CSC201 CA not recorded"},
        headers=headers,
    )
    assert res.status_code == 201
    petition = res.json()
    assert petition["student_id"] == str(student.id)
    assert petition["status"] == "Pending"

    res = await client.get("/api/petitions/pending", headers=hod_headers)
    assert [p["id"] for p in res.json()] == [petition["id"]]

    res = await client.get("/api/petitions/pending", params={"offset": 1}, headers=hod_headers)
    assert res.json() == []

    res = await client.put(
        f"/api/petitions/{petition['id']}", json={"assigned_to": str(hod.id)}, headers=hod_headers
    )
    body = res.json()
    assert body["status"] == "Under Review"
    assert body["assigned_at"] is not None

    res = await client.get("/api/petitions/pending", headers=hod_headers)
    assert res.json() == []

    res = await client.put(
        f"/api/petitions/{petition['id']}",
        json={"status": "Resolved", "resolution": "Score added"},
        headers=hod_headers,
    )
    assert res.json()["resolved_by"] == str(hod.id)

    res = await client.get("/api/petitions/by-status/Resolved", headers=headers)
    assert [p["id"] for p in res.json()] == [petition["id"]]


@pytest.mark.asyncio
async def test_audit_log_filters(client, as_role):
    admin, headers = await as_role("admin")

    await client.post("/api/faculties", json={"name": "Science", "code": "SCI"}, headers=headers)
    faculty = (await client.post("/api/faculties", json={"name": "Arts", "code": "ART"}, headers=headers)).json()
    await client.put(f"/api/faculties/{faculty['id']}", json={"name": "Arts and Humanities"}, headers=headers)

    res = await client.get("/api/audit-logs", params={"entity": "faculties", "action": "create"}, headers=headers)
    assert res.status_code == 200
    assert len(res.json()) == 2
    assert all(entry["user_id"] == str(admin.id) for entry in res.json())

    res = await client.get("/api/audit-logs", params={"entity": "faculties", "action": "UPDATE"}, headers=headers)
    (entry,) = res.json()
    assert entry["old_values"]["name"] == "Arts"
    assert entry["new_values"]["name"] == "Arts and Humanities"

    res = await client.get(f"/api/audit-logs/{entry['id']}", headers=headers)
    assert res.json()["entity_id"] == faculty["id"]

    res = await client.get("/api/audit-logs", params={"action": "LOGIN", "user_id": str(admin.id)}, headers=headers)
    assert len(res.json()) == 1

    res = await client.get(f"/api/audit-logs/{uuid.uuid4()}", headers=headers)
    assert res.status_code == 404

    _, registrar_headers = await as_role("registrar")
    res = await client.get("/api/audit-logs", headers=registrar_headers)
    assert res.status_code == 403
