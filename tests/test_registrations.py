import uuid
from datetime import date

import pytest


def registration_payload(session_id, **overrides):
    data = {
        "course_id": str(uuid.uuid4()),
        "session_id": str(session_id),
        "semester": "First",
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_student_registers_and_hod_approves(client, as_role):
    student, student_headers = await as_role("student")
    hod, hod_headers = await as_role("hod")
    session_id = uuid.uuid4()

    res = await client.post("/api/course-registrations", json=registration_payload(session_id), headers=student_headers)
    assert res.status_code == 201
    registration = res.json()
    assert registration["student_id"] == str(student.id)
    assert registration["status"] == "Pending"
    assert registration["hod_approved"] is False

    res = await client.get("/api/course-registrations/pending", headers=hod_headers)
    assert [r["id"] for r in res.json()] == [registration["id"]]

    res = await client.put(
        f"/api/course-registrations/{registration['id']}",
        json={"hod_approved": True, "status": "Approved"},
        headers=hod_headers,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["hod_approved"] is True
    assert body["hod_approved_by"] == str(hod.id)
    assert body["hod_approved_at"] is not None
    assert body["adviser_approved_at"] is None

    res = await client.get("/api/course-registrations/pending", headers=hod_headers)
    assert res.json() == []


@pytest.mark.asyncio
async def test_withdrawing_approval_clears_stamp(client, as_role):
    _, student_headers = await as_role("student")
    _, hod_headers = await as_role("hod")

    reg = (await client.post(
        "/api/course-registrations", json=registration_payload(uuid.uuid4()), headers=student_headers
    )).json()
    await client.put(f"/api/course-registrations/{reg['id']}", json={"hod_approved": True}, headers=hod_headers)

    res = await client.put(f"/api/course-registrations/{reg['id']}", json={"hod_approved": False}, headers=hod_headers)
    assert res.json()["hod_approved_at"] is None
    assert res.json()["hod_approved_by"] is None


@pytest.mark.asyncio
async def test_registrations_by_student_and_session(client, as_role):
    student, student_headers = await as_role("student")
    _, lecturer_headers = await as_role("lecturer")
    this_session, last_session = uuid.uuid4(), uuid.uuid4()

    await client.post("/api/course-registrations", json=registration_payload(this_session), headers=student_headers)
    await client.post(
        "/api/course-registrations", json=registration_payload(this_session, semester="Second"), headers=student_headers
    )
    await client.post("/api/course-registrations", json=registration_payload(last_session), headers=student_headers)

    params = {"student_id": str(student.id), "session_id": str(this_session)}
    res = await client.get("/api/course-registrations/by-student-and-session", params=params, headers=lecturer_headers)
    assert len(res.json()) == 2

    res = await client.get(
        "/api/course-registrations/by-student-and-session",
        params={**params, "semester": "Second"},
        headers=lecturer_headers,
    )
    assert [r["semester"] for r in res.json()] == ["Second"]

    res = await client.get(f"/api/course-registrations/by-student/{student.id}", headers=lecturer_headers)
    assert len(res.json()) == 3


@pytest.mark.asyncio
async def test_student_cannot_read_classmates_registrations(client, as_role):
    _, first_headers = await as_role("student")
    second, second_headers = await as_role("student")
    session_id = uuid.uuid4()

    reg = (await client.post(
        "/api/course-registrations", json=registration_payload(session_id), headers=second_headers
    )).json()

    assert (await client.get(f"/api/course-registrations/{reg['id']}", headers=first_headers)).status_code == 404
    res = await client.get(
        "/api/course-registrations/by-student-and-session",
        params={"student_id": str(second.id), "session_id": str(session_id)},
        headers=first_headers,
    )
    assert res.json() == []


@pytest.mark.asyncio
async def test_attendance_defaults_marker(client, as_role, make_user):
    lecturer, headers = await as_role("lecturer")
    student = await make_user("student")

    res = await client.post(
        "/api/attendance",
        json={
            "student_id": str(student.id),
            "course_id": str(uuid.uuid4()),
            "session_id": str(uuid.uuid4()),
            "semester": "First",
            "attendance_date": date(2025, 10, 6).isoformat(),
            "status": "Present",
        },
        headers=headers,
    )
    assert res.status_code == 201
    assert res.json()["marked_by"] == str(lecturer.id)
