import uuid
from decimal import Decimal

import pytest


def result_payload(student_id, **overrides):
    data = {
        "student_id": str(student_id),
        "course_id": str(uuid.uuid4()),
        "session_id": str(uuid.uuid4()),
        "semester": "First",
        "ca_total": "28.50",
        "exam_score": "55",
        "total_score": "83.50",
        "grade": "A",
        "grade_point": "5.00",
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_lecturer_uploads_result(client, as_role, make_user):
    lecturer, headers = await as_role("lecturer")
    student = await make_user("student")

    res = await client.post("/api/results", json=result_payload(student.id), headers=headers)
    assert res.status_code == 201

    result = res.json()
    assert result["status"] == "Draft"
    assert result["uploaded_by"] == str(lecturer.id)
    assert result["uploaded_at"] is not None
    assert Decimal(result["total_score"]) == Decimal("83.50")


@pytest.mark.asyncio
async def test_upload_requires_upload_permission(client, as_role):
    student, headers = await as_role("student")
    res = await client.post("/api/results", json=result_payload(student.id), headers=headers)
    assert res.status_code == 403
    assert res.json()["detail"] == "Insufficient permissions: upload:results"


@pytest.mark.asyncio
async def test_upload_without_student_is_rejected(client, as_role):
    _, headers = await as_role("lecturer")
    payload = result_payload(uuid.uuid4())
    payload.pop("student_id")

    res = await client.post("/api/results", json=payload, headers=headers)
    assert res.status_code == 400
    assert res.json()["detail"] == "student_id is required"


@pytest.mark.asyncio
async def test_scores_are_bounded(client, as_role, make_user):
    _, headers = await as_role("lecturer")
    student = await make_user("student")
    res = await client.post("/api/results", json=result_payload(student.id, exam_score="120"), headers=headers)
    assert res.status_code == 422


@pytest.mark.asyncio
async def test_hod_approves_result(client, as_role, make_user):
    _, lecturer_headers = await as_role("lecturer")
    hod, hod_headers = await as_role("hod")
    student = await make_user("student")

    res = await client.post("/api/results", json=result_payload(student.id), headers=lecturer_headers)
    result_id = res.json()["id"]

    # lecturers upload but do not approve
    res = await client.post(f"/api/results/{result_id}/approve", headers=lecturer_headers)
    assert res.status_code == 403

    res = await client.post(f"/api/results/{result_id}/approve", headers=hod_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Approved"
    assert body["approved_by"] == str(hod.id)
    assert body["approved_at"] is not None

    res = await client.post(f"/api/results/{result_id}/approve", headers=hod_headers)
    assert res.status_code == 400


@pytest.mark.asyncio
async def test_update_cannot_approve(client, as_role, make_user):
    _, headers = await as_role("lecturer")
    student = await make_user("student")
    result_id = (await client.post("/api/results", json=result_payload(student.id), headers=headers)).json()["id"]

    res = await client.put(f"/api/results/{result_id}", json={"status": "Approved"}, headers=headers)
    assert res.status_code == 400

    res = await client.put(f"/api/results/{result_id}", json={"status": "Submitted", "exam_score": "60"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["status"] == "Submitted"
    assert Decimal(res.json()["exam_score"]) == Decimal("60")


@pytest.mark.asyncio
async def test_student_sees_only_own_results(client, as_role, make_user, login):
    _, lecturer_headers = await as_role("lecturer")
    student = await make_user("student")
    classmate = await make_user("student")

    mine = (await client.post("/api/results", json=result_payload(student.id), headers=lecturer_headers)).json()
    theirs = (await client.post("/api/results", json=result_payload(classmate.id), headers=lecturer_headers)).json()

    headers = await login(student)

    res = await client.get("/api/results", headers=headers)
    assert [r["id"] for r in res.json()] == [mine["id"]]

    assert (await client.get(f"/api/results/{mine['id']}", headers=headers)).status_code == 200
    # someone else's row looks missing
    assert (await client.get(f"/api/results/{theirs['id']}", headers=headers)).status_code == 404

    res = await client.get(f"/api/results/by-student/{classmate.id}", headers=headers)
    assert res.json() == []

    # own scope never extends to writes the role does not hold
    res = await client.put(f"/api/results/{mine['id']}", json={"exam_score": "70"}, headers=headers)
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_results_by_student(client, as_role, make_user):
    _, headers = await as_role("lecturer")
    student = await make_user("student")
    for _ in range(3):
        await client.post("/api/results", json=result_payload(student.id), headers=headers)

    res = await client.get(f"/api/results/by-student/{student.id}", headers=headers)
    assert res.status_code == 200
    assert len(res.json()) == 3
    assert all(r["student_id"] == str(student.id) for r in res.json())


@pytest.mark.asyncio
async def test_invalid_result_id(client, as_role):
    _, headers = await as_role("lecturer")
    assert (await client.get("/api/results/not-a-uuid", headers=headers)).status_code == 422
    assert (await client.get(f"/api/results/{uuid.uuid4()}", headers=headers)).status_code == 404


@pytest.mark.asyncio
async def test_upload_always_starts_as_draft(client, as_role, make_user):
    _, headers = await as_role("lecturer")
    student = await make_user("student")

    res = await client.post(
        "/api/results", json=result_payload(student.id, status="Approved"), headers=headers
    )
    assert res.status_code == 201
    assert res.json()["status"] == "Draft"
    assert res.json()["approved_by"] is None


@pytest.mark.asyncio
async def test_publish_needs_an_approved_result(client, as_role, make_user):
    _, headers = await as_role("lecturer")
    _, hod_headers = await as_role("hod")
    student = await make_user("student")
    result_id = (await client.post("/api/results", json=result_payload(student.id), headers=headers)).json()["id"]

    res = await client.put(f"/api/results/{result_id}", json={"status": "Published"}, headers=headers)
    assert res.status_code == 400

    res = await client.get(f"/api/results/{result_id}", headers=headers)
    assert res.json()["status"] == "Draft"

    await client.post(f"/api/results/{result_id}/approve", headers=hod_headers)
    res = await client.put(f"/api/results/{result_id}", json={"status": "Published"}, headers=hod_headers)
    assert res.status_code == 200
    assert res.json()["status"] == "Published"
