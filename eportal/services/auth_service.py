# eportal/services/auth_service.py

import uuid
from datetime import datetime, timedelta
from typing import Any, Iterable, Optional

import jwt
from fastapi import Request
from loguru import logger
from sqlmodel import select
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.config import settings
from eportal.core.rate_limiter import get_real_ip
from eportal.core.security import (
    hash_password,
    verify_password,
    generate_session_token,
    generate_otp,
    create_session_jwt,
    decode_token,
)
from eportal.core.timeutils import utcnow
from eportal.models.auth_session import AuthSession
from eportal.models.rbac import UserRoleLink
from eportal.models.user import User
from eportal.services import rbac_service
from eportal.services.audit_service import record_audit, snapshot

INACTIVE_STATUSES = {"suspended", "withdrawn"}


class InvalidCredentialsError(Exception):
    pass


class AccountLockedError(Exception):
    def __init__(self, locked_until: datetime):
        super().__init__(f"Account locked until {locked_until.isoformat()}")
        self.locked_until = locked_until


class AccountInactiveError(Exception):
    def __init__(self, status: str):
        super().__init__(f"Account is {status}")
        self.status = status


# ============================================================================
# FETCH USER
# ============================================================================
async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    result = await session.execute(select(User).where(User.email == email.strip().lower()))
    return result.scalar_one_or_none()


async def get_user_by_id(session: AsyncSession, user_id: uuid.UUID | str) -> User | None:
    if isinstance(user_id, str):
        try:
            user_id = uuid.UUID(user_id)
        except ValueError:
            return None
    return await session.get(User, user_id)


# ============================================================================
# CREATE USER
# ============================================================================
async def create_user(
    session: AsyncSession,
    data: dict[str, Any],
    password: str,
    user_type: str,
    status: str = "active",
    role_ids: Optional[Iterable[uuid.UUID]] = None,
    actor_id: Optional[uuid.UUID] = None,
    request: Optional[Request] = None,
) -> User:
    """
    Insert a user and its role links in one transaction.
    Without role_ids the default role named after user_type is attached.
    """
    data = dict(data)
    data["email"] = data["email"].strip().lower()

    if await get_user_by_email(session, data["email"]):
        raise ValueError("User with this email already exists")

    name = " ".join(p for p in (data.get("first_name"), data.get("middle_name"), data.get("last_name")) if p)
    user = User(
        **data,
        name=name,
        password_hash=hash_password(password),
        user_type=user_type,
        status=status,
        is_admin=user_type == "admin",
        created_by=actor_id,
        updated_by=actor_id,
    )
    session.add(user)
    await session.flush()

    try:
        if role_ids is not None:
            await rbac_service.set_user_roles(session, user.id, role_ids)
        else:
            await rbac_service.assign_default_role(session, user.id, user_type)

        record_audit(
            session,
            action="CREATE",
            entity="users",
            entity_id=user.id,
            user_id=actor_id,
            new_values=snapshot(user),
            request=request,
        )
        await session.commit()
    except ValueError:
        await session.rollback()
        raise

    await session.refresh(user)
    logger.info(f"User created: {user.email} ({user_type})")
    return user


async def sign_up_student(session: AsyncSession, data: dict[str, Any], password: str, request: Optional[Request] = None) -> User:
    # the public form never chooses its own user_type
    data = {k: v for k, v in data.items() if k not in {"user_type", "status", "role_ids"}}
    return await create_user(session, data, password, user_type="student", request=request)


# ============================================================================
# SESSIONS
# ============================================================================
async def create_auth_session(
    session: AsyncSession,
    user: User,
    request: Optional[Request] = None,
) -> tuple[AuthSession, str]:
    """Returns the stored session row and the signed cookie value. Caller commits."""
    expires_at = utcnow() + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    auth_session = AuthSession(
        token=generate_session_token(),
        user_id=user.id,
        expires_at=expires_at,
        ip_address=get_real_ip(request) if request is not None else None,
        user_agent=request.headers.get("user-agent") if request is not None else None,
    )
    session.add(auth_session)
    return auth_session, create_session_jwt(str(user.id), auth_session.token, expires_at)


async def resolve_session(session: AsyncSession, token: str) -> tuple[User, AuthSession] | None:
    """JWT -> session row -> user. None when any link is missing, revoked or expired."""
    try:
        payload = decode_token(token)
    except jwt.PyJWTError:
        return None

    user_id, sid = payload.get("sub"), payload.get("sid")
    if not user_id or not sid:
        return None

    result = await session.execute(select(AuthSession).where(AuthSession.token == sid))
    auth_session = result.scalar_one_or_none()
    if not auth_session or str(auth_session.user_id) != user_id:
        return None
    if auth_session.expires_at <= utcnow():
        return None

    user = await get_user_by_id(session, auth_session.user_id)
    if not user:
        return None
    return user, auth_session


async def revoke_user_sessions(
    session: AsyncSession,
    user_id: uuid.UUID,
    keep_token: Optional[str] = None,
) -> None:
    stmt = delete(AuthSession).where(AuthSession.user_id == user_id)
    if keep_token:
        stmt = stmt.where(AuthSession.token != keep_token)
    await session.execute(stmt)


# ============================================================================
# SIGN IN / SIGN OUT
# ============================================================================
async def sign_in(
    session: AsyncSession,
    email: str,
    password: str,
    request: Optional[Request] = None,
) -> tuple[User, AuthSession, str]:
    user = await get_user_by_email(session, email)
    if not user:
        raise InvalidCredentialsError()

    now = utcnow()
    if user.account_locked_until and user.account_locked_until > now:
        raise AccountLockedError(user.account_locked_until)

    if not verify_password(password, user.password_hash):
        user.login_attempts = (user.login_attempts or 0) + 1
        if user.login_attempts >= settings.MAX_LOGIN_ATTEMPTS:
            user.account_locked_until = now + timedelta(minutes=settings.LOCKOUT_MINUTES)
            user.login_attempts = 0
            logger.warning(f"🔒 Account locked after repeated failures: {user.email}")
        session.add(user)
        await session.commit()
        raise InvalidCredentialsError()

    if user.status in INACTIVE_STATUSES:
        raise AccountInactiveError(user.status)

    user.login_attempts = 0
    user.account_locked_until = None
    user.last_login = now
    session.add(user)

    auth_session, token = await create_auth_session(session, user, request)
    record_audit(session, action="LOGIN", entity="users", entity_id=user.id, user_id=user.id, request=request)
    await session.commit()
    await session.refresh(user)

    logger.info(f"Signed in: {user.email}")
    return user, auth_session, token


async def sign_out(session: AsyncSession, token: Optional[str], request: Optional[Request] = None) -> None:
    """Idempotent: unknown or expired credentials are ignored."""
    if not token:
        return
    try:
        payload = decode_token(token)
    except jwt.PyJWTError:
        return

    result = await session.execute(select(AuthSession).where(AuthSession.token == payload.get("sid")))
    auth_session = result.scalar_one_or_none()
    if not auth_session:
        return

    await session.delete(auth_session)
    record_audit(
        session,
        action="LOGOUT",
        entity="users",
        entity_id=auth_session.user_id,
        user_id=auth_session.user_id,
        request=request,
    )
    await session.commit()


# ============================================================================
# CHANGE PASSWORD
# ============================================================================
async def change_password(
    session: AsyncSession,
    user: User,
    old_password: str,
    new_password: str,
    current_token: Optional[str] = None,
) -> None:
    if not verify_password(old_password, user.password_hash):
        raise ValueError("Incorrect old password")
    if old_password == new_password:
        raise ValueError("New password cannot be the same as the old password")

    user.password_hash = hash_password(new_password)
    user.updated_at = utcnow()
    session.add(user)
    await revoke_user_sessions(session, user.id, keep_token=current_token)
    record_audit(session, action="UPDATE", entity="users", entity_id=user.id, user_id=user.id,
                 details={"event": "password_change"})
    await session.commit()


# ============================================================================
# FORGOT PASSWORD
# ============================================================================
async def request_password_reset(session: AsyncSession, email: str) -> tuple[User, str]:
    user = await get_user_by_email(session, email)
    if not user:
        raise LookupError("User not found")

    otp = generate_otp()
    user.password_reset_token = hash_password(otp)
    user.password_reset_expires = utcnow() + timedelta(minutes=settings.PASSWORD_RESET_OTP_MINUTES)
    user.password_reset_attempts = 0
    session.add(user)
    await session.commit()
    return user, otp


async def _otp_matches(session: AsyncSession, user: User | None, otp: str) -> bool:
    """
    Check otp against the stored hash. Each miss is counted; after
    MAX_RESET_OTP_ATTEMPTS misses the OTP is discarded.
    """
    if not user or not user.password_reset_token or not user.password_reset_expires:
        return False
    if user.password_reset_expires < utcnow():
        return False
    if verify_password(otp, user.password_reset_token):
        return True

    user.password_reset_attempts = (user.password_reset_attempts or 0) + 1
    if user.password_reset_attempts >= settings.MAX_RESET_OTP_ATTEMPTS:
        user.password_reset_token = None
        user.password_reset_expires = None
        user.password_reset_attempts = 0
        logger.warning(f"🔒 Reset OTP discarded after repeated failures: {user.email}")
    session.add(user)
    await session.commit()
    return False


async def verify_reset_otp(session: AsyncSession, email: str, otp: str) -> bool:
    user = await get_user_by_email(session, email)
    return await _otp_matches(session, user, otp)


async def finalize_password_reset(session: AsyncSession, email: str, otp: str, new_password: str) -> None:
    user = await get_user_by_email(session, email)
    if not await _otp_matches(session, user, otp):
        raise ValueError("Invalid or expired OTP")

    user.password_hash = hash_password(new_password)
    user.password_reset_token = None
    user.password_reset_expires = None
    user.password_reset_attempts = 0
    user.login_attempts = 0
    user.account_locked_until = None
    session.add(user)
    await revoke_user_sessions(session, user.id)
    record_audit(session, action="UPDATE", entity="users", entity_id=user.id, user_id=user.id,
                 details={"event": "password_reset"})
    await session.commit()


# ============================================================================
# LIST / UPDATE / DELETE USERS
# ============================================================================
async def list_users(
    session: AsyncSession,
    user_type: Optional[str] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> list[User]:
    query = select(User)
    if user_type:
        query = query.where(User.user_type == user_type)
    query = query.order_by(User.created_at)
    if offset:
        query = query.offset(offset)
    if limit:
        query = query.limit(limit)
    result = await session.execute(query)
    return list(result.scalars().all())


async def update_user(
    session: AsyncSession,
    user: User,
    changes: dict[str, Any],
    role_ids: Optional[Iterable[uuid.UUID]] = None,
    actor_id: Optional[uuid.UUID] = None,
    request: Optional[Request] = None,
) -> User:
    old_values = snapshot(user)

    email = changes.get("email")
    if email:
        email = email.strip().lower()
        if email != user.email and await get_user_by_email(session, email):
            raise ValueError("Email already in use")
        changes["email"] = email

    for field, value in changes.items():
        setattr(user, field, value)

    if {"first_name", "middle_name", "last_name"} & changes.keys():
        user.name = " ".join(p for p in (user.first_name, user.middle_name, user.last_name) if p)
    if "user_type" in changes:
        user.is_admin = user.user_type == "admin"

    user.updated_by = actor_id
    user.updated_at = utcnow()
    session.add(user)

    try:
        if role_ids is not None:
            await rbac_service.set_user_roles(session, user.id, role_ids)
        record_audit(
            session,
            action="UPDATE",
            entity="users",
            entity_id=user.id,
            user_id=actor_id,
            old_values=old_values,
            new_values=snapshot(user),
            request=request,
        )
        await session.commit()
    except ValueError:
        await session.rollback()
        raise

    await session.refresh(user)
    return user


async def delete_user(
    session: AsyncSession,
    user: User,
    actor_id: Optional[uuid.UUID] = None,
    request: Optional[Request] = None,
) -> None:
    old_values = snapshot(user)
    await session.execute(delete(UserRoleLink).where(UserRoleLink.user_id == user.id))
    await session.execute(delete(AuthSession).where(AuthSession.user_id == user.id))
    await session.delete(user)
    record_audit(
        session,
        action="DELETE",
        entity="users",
        entity_id=user.id,
        user_id=actor_id,
        old_values=old_values,
        request=request,
    )
    await session.commit()
