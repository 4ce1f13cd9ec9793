# eportal/core/security.py
import hashlib
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext

from eportal.core.config import settings

# 1. Configuration
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
ALGORITHM = "HS256"


# 2. Password Handling
def _pre_hash_password(password: str) -> str:
    """
    Handle the bcrypt 72-byte limit.
    Passwords longer than 72 bytes are SHA-256 hashed first so the whole
    password still matters; the 64-char hexdigest fits inside the limit.
    """
    if len(password.encode("utf-8")) <= 72:
        return password
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def hash_password(password: str) -> str:
    return pwd_context.hash(_pre_hash_password(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(_pre_hash_password(plain_password), hashed_password)


# 3. Session credentials
def generate_session_token() -> str:
    return secrets.token_urlsafe(32)


def generate_otp() -> str:
    return f"{secrets.randbelow(900000) + 100000}"


def create_session_jwt(
    user_id: str,
    session_token: str,
    expires_at: Optional[datetime] = None,
) -> str:
    """Sign the cookie value: it names the user and the server-side session row."""
    now = datetime.now(timezone.utc)
    if expires_at is None:
        expires_at = now + timedelta(minutes=settings.SESSION_EXPIRE_MINUTES)
    elif expires_at.tzinfo is None:
        expires_at = expires_at.replace(tzinfo=timezone.utc)

    to_encode = {
        "sub": str(user_id),
        "sid": session_token,
        "exp": expires_at,
        "iat": now,
        "nbf": now,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    # raises jwt.PyJWTError (ExpiredSignatureError, InvalidTokenError, ...)
    return jwt.decode(
        token,
        settings.SECRET_KEY,
        algorithms=[ALGORITHM],
        options={"verify_exp": True},
    )
