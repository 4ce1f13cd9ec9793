from datetime import timedelta

import pytest
from unittest.mock import patch
from sqlalchemy import update

from eportal.core.config import settings
from eportal.core.rate_limiter import AUTH_RATE_LIMIT, limiter
from eportal.core.timeutils import utcnow
from eportal.models.auth_session import AuthSession
from eportal.models.user import User
from factories import DEFAULT_PASSWORD, profile


@pytest.mark.asyncio
async def test_sign_in_returns_session_and_sets_cookie(client, make_user):
    user = await make_user("lecturer")

    res = await client.post("/api/auth/sign-in", json={"email": user.email, "password": DEFAULT_PASSWORD})
    assert res.status_code == 200

    data = res.json()
    assert data["token_type"] == "bearer"
    assert data["user"]["email"] == user.email
    assert "password_hash" not in data["user"]
    assert data["roles"] == ["lecturer"]
    assert "upload:results" in data["permissions"]
    assert settings.SESSION_COOKIE_NAME in res.cookies

    # the cookie alone authenticates follow-up calls
    res = await client.get("/api/auth/session")
    assert res.status_code == 200
    assert res.json()["user"]["id"] == str(user.id)


@pytest.mark.asyncio
async def test_sign_in_email_is_case_insensitive(client, make_user):
    user = await make_user("student", email="mixed.case@eportal.edu.ng")
    res = await client.post("/api/auth/sign-in", json={"email": "Mixed.Case@eportal.edu.ng", "password": DEFAULT_PASSWORD})
    assert res.status_code == 200
    assert res.json()["user"]["id"] == str(user.id)


@pytest.mark.asyncio
async def test_sign_in_rejects_bad_credentials(client, make_user):
    user = await make_user("student")

    res = await client.post("/api/auth/sign-in", json={"email": user.email, "password": "wrong-password"})
    assert res.status_code == 401
    assert res.json()["detail"] == "Invalid credentials"

    res = await client.post("/api/auth/sign-in", json={"email": "nobody@eportal.edu.ng", "password": "whatever1"})
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_repeated_failures_lock_the_account(client, make_user):
    user = await make_user("student")

    for _ in range(settings.MAX_LOGIN_ATTEMPTS):
        res = await client.post("/api/auth/sign-in", json={"email": user.email, "password": "wrong-password"})
        assert res.status_code == 401

    # even the right password is refused while locked
    res = await client.post("/api/auth/sign-in", json={"email": user.email, "password": DEFAULT_PASSWORD})
    assert res.status_code == 423


@pytest.mark.asyncio
async def test_suspended_account_cannot_sign_in(client, make_user):
    user = await make_user("student", status="suspended")
    res = await client.post("/api/auth/sign-in", json={"email": user.email, "password": DEFAULT_PASSWORD})
    assert res.status_code == 403


@pytest.mark.asyncio
async def test_session_requires_authentication(client):
    res = await client.get("/api/auth/session")
    assert res.status_code == 401

    res = await client.get("/api/auth/session", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_sign_out_revokes_session(client, make_user, login):
    user = await make_user("student")
    headers = await login(user)

    res = await client.post("/api/auth/sign-out", headers=headers)
    assert res.status_code == 200

    # the JWT is still well-formed but its session row is gone
    res = await client.get("/api/auth/session", headers=headers)
    assert res.status_code == 401

    # idempotent
    res = await client.post("/api/auth/sign-out", headers=headers)
    assert res.status_code == 200


@pytest.mark.asyncio
async def test_permissions_endpoint(client, make_user, login):
    user = await make_user("student")
    headers = await login(user)

    res = await client.get("/api/auth/permissions", headers=headers)
    assert res.status_code == 200
    permissions = res.json()["permissions"]
    assert "view:dashboard" in permissions
    assert "view_own:results" in permissions
    assert "approve:results" not in permissions


@pytest.mark.asyncio
async def test_sign_up_always_creates_student(client):
    payload = {**profile(email="fresher@eportal.edu.ng"), "password": DEFAULT_PASSWORD, "user_type": "admin"}

    with patch("eportal.api.endpoints.auth.send_welcome_email") as mock_send:
        res = await client.post("/api/auth/sign-up", json=payload)

    assert res.status_code == 201
    body = res.json()
    assert body["user_type"] == "student"
    assert body["name"] == "Ada Obi"
    mock_send.assert_called_once()

    res = await client.post("/api/auth/sign-in", json={"email": "fresher@eportal.edu.ng", "password": DEFAULT_PASSWORD})
    assert res.json()["roles"] == ["student"]


@pytest.mark.asyncio
async def test_sign_up_duplicate_email(client, make_user):
    user = await make_user("student")
    payload = {**profile(email=user.email), "password": DEFAULT_PASSWORD}

    with patch("eportal.api.endpoints.auth.send_welcome_email"):
        res = await client.post("/api/auth/sign-up", json=payload)
    assert res.status_code == 400


@pytest.mark.asyncio
async def test_password_reset_flow(client, make_user, login):
    user = await make_user("student")
    old_headers = await login(user)

    with patch("eportal.api.endpoints.auth.send_password_reset_email") as mock_send:
        res = await client.post("/api/auth/forgot-password", json={"email": user.email})
    assert res.status_code == 200
    otp = mock_send.call_args[0][1]
    assert len(otp) == 6 and otp.isdigit()

    wrong = "000000" if otp != "000000" else "111111"
    res = await client.post("/api/auth/verify-reset-otp", json={"email": user.email, "otp": wrong})
    assert res.status_code == 400

    res = await client.post("/api/auth/verify-reset-otp", json={"email": user.email, "otp": otp})
    assert res.status_code == 200

    res = await client.post(
        "/api/auth/reset-password",
        json={"email": user.email, "otp": otp, "new_password": "BrandNewPass1"},
    )
    assert res.status_code == 200

    # every earlier session is revoked
    res = await client.get("/api/auth/session", headers=old_headers)
    assert res.status_code == 401

    # the OTP is single use
    res = await client.post(
        "/api/auth/reset-password",
        json={"email": user.email, "otp": otp, "new_password": "AnotherPass1"},
    )
    assert res.status_code == 400

    await login(user, password="BrandNewPass1")


@pytest.mark.asyncio
async def test_forgot_password_unknown_email(client):
    res = await client.post("/api/auth/forgot-password", json={"email": "ghost@eportal.edu.ng"})
    assert res.status_code == 404


async def request_otp(client, user):
    with patch("eportal.api.endpoints.auth.send_password_reset_email") as mock_send:
        res = await client.post("/api/auth/forgot-password", json={"email": user.email})
    assert res.status_code == 200
    return mock_send.call_args[0][1]


@pytest.mark.asyncio
async def test_reset_otp_is_discarded_after_repeated_misses(client, make_user):
    user = await make_user("student")
    otp = await request_otp(client, user)
    wrong = "000000" if otp != "000000" else "111111"

    for _ in range(settings.MAX_RESET_OTP_ATTEMPTS):
        res = await client.post("/api/auth/verify-reset-otp", json={"email": user.email, "otp": wrong})
        assert res.status_code == 400

    # the real code no longer works either
    res = await client.post("/api/auth/verify-reset-otp", json={"email": user.email, "otp": otp})
    assert res.status_code == 400
    res = await client.post(
        "/api/auth/reset-password",
        json={"email": user.email, "otp": otp, "new_password": "BrandNewPass1"},
    )
    assert res.status_code == 400

    # a fresh request starts over
    otp = await request_otp(client, user)
    res = await client.post("/api/auth/verify-reset-otp", json={"email": user.email, "otp": otp})
    assert res.status_code == 200


@pytest.mark.asyncio
async def test_expired_reset_otp_is_rejected(client, make_user, session):
    user = await make_user("student")
    otp = await request_otp(client, user)

    await session.execute(
        update(User).where(User.id == user.id).values(password_reset_expires=utcnow() - timedelta(minutes=1))
    )
    await session.commit()

    res = await client.post("/api/auth/verify-reset-otp", json={"email": user.email, "otp": otp})
    assert res.status_code == 400
    res = await client.post(
        "/api/auth/reset-password",
        json={"email": user.email, "otp": otp, "new_password": "BrandNewPass1"},
    )
    assert res.status_code == 400


@pytest.mark.asyncio
async def test_expired_session_row_does_not_authenticate(client, make_user, login, session):
    user = await make_user("student")
    headers = await login(user)
    assert (await client.get("/api/auth/session", headers=headers)).status_code == 200

    # the JWT itself is still within its lifetime
    await session.execute(
        update(AuthSession).where(AuthSession.user_id == user.id).values(expires_at=utcnow() - timedelta(seconds=1))
    )
    await session.commit()

    res = await client.get("/api/auth/session", headers=headers)
    assert res.status_code == 401


@pytest.mark.asyncio
async def test_otp_checks_are_rate_limited(client, monkeypatch):
    monkeypatch.setattr(limiter, "enabled", True)
    limiter.reset()
    try:
        allowed = int(AUTH_RATE_LIMIT.split("/")[0])
        payload = {"email": "ghost@eportal.edu.ng", "otp": "123456"}
        for _ in range(allowed):
            res = await client.post("/api/auth/verify-reset-otp", json=payload)
            assert res.status_code == 400

        res = await client.post("/api/auth/verify-reset-otp", json=payload)
        assert res.status_code == 429
    finally:
        limiter.reset()
