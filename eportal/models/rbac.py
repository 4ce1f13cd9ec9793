# eportal/models/rbac.py

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


# ------------------------------------------------------------
# ROLES ('admin', 'hod', 'lecturer', 'student', ...)
# ------------------------------------------------------------
class Role(SQLModel, table=True):
    __tablename__ = "roles"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=50, unique=True, index=True)
    description: Optional[str] = None
    is_system_role: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": utcnow},
    )


# ------------------------------------------------------------
# PERMISSIONS (action + resource)
# ------------------------------------------------------------
class Permission(SQLModel, table=True):
    __tablename__ = "permissions"
    __table_args__ = (UniqueConstraint("action", "resource", name="uq_permission_action_resource"),)

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    action: str = Field(max_length=100, index=True)
    resource: str = Field(max_length=100, index=True)
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow, nullable=False)


# ------------------------------------------------------------
# JUNCTIONS
# ------------------------------------------------------------
class RolePermission(SQLModel, table=True):
    __tablename__ = "role_permissions"

    role_id: uuid.UUID = Field(foreign_key="roles.id", primary_key=True, ondelete="CASCADE")
    permission_id: uuid.UUID = Field(foreign_key="permissions.id", primary_key=True, ondelete="CASCADE")


class UserRoleLink(SQLModel, table=True):
    __tablename__ = "user_roles"

    user_id: uuid.UUID = Field(foreign_key="users.id", primary_key=True, ondelete="CASCADE")
    role_id: uuid.UUID = Field(foreign_key="roles.id", primary_key=True, ondelete="CASCADE")
