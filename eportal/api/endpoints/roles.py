# eportal/api/endpoints/roles.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.crud import service_errors
from eportal.api.deps import get_db_session
from eportal.core.rbac import RequirePermission
from eportal.models.rbac import Role
from eportal.models.user import User
from eportal.schemas.rbac import (
    PermissionRead,
    RoleCreate,
    RolePermissionsUpdate,
    RoleRead,
    RoleWithPermissions,
)
from eportal.services import rbac_service

router = APIRouter(prefix="/api/roles", tags=["Roles"])
permissions_router = APIRouter(prefix="/api/permissions", tags=["Roles"])


async def _with_permissions(session: AsyncSession, role: Role) -> dict:
    return {
        **role.model_dump(),
        "permissions": await rbac_service.get_role_permissions(session, role.id),
    }


@router.get("", response_model=List[RoleRead])
async def list_roles(
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "roles")),
):
    return await rbac_service.list_roles(session)


@router.get("/{role_id}", response_model=RoleWithPermissions)
async def get_role(
    role_id: UUID,
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "roles")),
):
    role = await session.get(Role, role_id)
    if not role:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Role not found")
    return await _with_permissions(session, role)


@router.post("", response_model=RoleWithPermissions, status_code=status.HTTP_201_CREATED)
async def create_role(
    data: RoleCreate,
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("create", "roles")),
):
    with service_errors():
        role = await rbac_service.create_role(session, data.name, data.description, data.permission_ids)
    return await _with_permissions(session, role)


@router.put("/{role_id}/permissions", response_model=RoleWithPermissions)
async def update_role_permissions(
    role_id: UUID,
    data: RolePermissionsUpdate,
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("update", "roles")),
):
    with service_errors():
        role = await rbac_service.update_role_permissions(session, role_id, data.permission_ids)
    return await _with_permissions(session, role)


@router.delete("/{role_id}")
async def delete_role(
    role_id: UUID,
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("delete", "roles")),
):
    with service_errors():
        await rbac_service.delete_role(session, role_id)
    return {"success": True}


# -------------------------------------------------------------------
# Permission catalogue
# -------------------------------------------------------------------
@permissions_router.get("", response_model=List[PermissionRead])
async def list_permissions(
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "permissions")),
):
    return await rbac_service.list_permissions(session)
