# eportal/api/deps.py

from typing import AsyncGenerator, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.config import settings
from eportal.core.database import get_session
from eportal.models.user import User
from eportal.services.auth_service import resolve_session


# ------------------------------------------------------------
# Credentials: session cookie, or "Authorization: Bearer <jwt>"
# ------------------------------------------------------------
bearer_scheme = HTTPBearer(auto_error=False)


# ------------------------------------------------------------
# DB Session
# ------------------------------------------------------------
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async for session in get_session():
        yield session


def get_session_token(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> Optional[str]:
    if credentials and credentials.credentials:
        return credentials.credentials
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


# ------------------------------------------------------------
# Get current signed-in user from the session credential
# ------------------------------------------------------------
async def get_current_user(
    request: Request,
    token: Optional[str] = Depends(get_session_token),
    session: AsyncSession = Depends(get_db_session),
) -> User:
    if not token:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Authentication required")

    resolved = await resolve_session(session, token)
    if not resolved:
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Authentication required")

    user, auth_session = resolved
    # change-password keeps the caller's own session alive
    request.state.auth_session = auth_session
    return user
