from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class PermissionRead(BaseModel):
    id: UUID
    action: str
    resource: str
    description: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class RoleRead(BaseModel):
    id: UUID
    name: str
    description: Optional[str] = None
    is_system_role: bool = False
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class RoleWithPermissions(RoleRead):
    permissions: List[PermissionRead] = []


class RoleCreate(BaseModel):
    name: str = Field(min_length=2, max_length=50)
    description: Optional[str] = None
    permission_ids: List[UUID] = []


class RolePermissionsUpdate(BaseModel):
    permission_ids: List[UUID]
