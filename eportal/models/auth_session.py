# eportal/models/auth_session.py

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class AuthSession(SQLModel, table=True):
    """Server-side half of a sign-in; the cookie only carries `token` signed."""
    __tablename__ = "auth_sessions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    token: str = Field(nullable=False, unique=True, index=True)
    user_id: uuid.UUID = Field(foreign_key="users.id", ondelete="CASCADE", index=True)
    expires_at: datetime = Field(nullable=False)

    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": utcnow},
    )
