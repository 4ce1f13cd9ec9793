# eportal/services/rbac_service.py

import uuid
from typing import Iterable

from sqlmodel import select
from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.constants import ADMIN_ROLE, build_permission_catalogue
from eportal.models.rbac import Permission, Role, RolePermission, UserRoleLink


def permission_key(action: str, resource: str) -> str:
    return f"{action}:{resource}"


# ============================================================================
# ROLE LOOKUPS
# ============================================================================
async def get_user_roles(session: AsyncSession, user_id: uuid.UUID) -> list[Role]:
    result = await session.execute(
        select(Role)
        .join(UserRoleLink, UserRoleLink.role_id == Role.id)
        .where(UserRoleLink.user_id == user_id)
        .order_by(Role.name)
    )
    return list(result.scalars().all())


async def get_user_role_names(session: AsyncSession, user_id: uuid.UUID) -> list[str]:
    return [role.name for role in await get_user_roles(session, user_id)]


async def is_admin(session: AsyncSession, user_id: uuid.UUID) -> bool:
    result = await session.execute(
        select(Role.id)
        .join(UserRoleLink, UserRoleLink.role_id == Role.id)
        .where(UserRoleLink.user_id == user_id, Role.name == ADMIN_ROLE)
        .limit(1)
    )
    return result.scalar_one_or_none() is not None


# ============================================================================
# PERMISSION CHECK
# ============================================================================
async def has_permission(
    session: AsyncSession,
    user_id: uuid.UUID,
    action: str,
    resource: str,
) -> bool:
    """
    True when the user holds the admin role, or when any of the user's roles
    is granted exactly (action, resource).
    """
    if await is_admin(session, user_id):
        return True

    result = await session.execute(
        select(Permission.id)
        .join(RolePermission, RolePermission.permission_id == Permission.id)
        .join(UserRoleLink, UserRoleLink.role_id == RolePermission.role_id)
        .where(
            UserRoleLink.user_id == user_id,
            Permission.action == action,
            Permission.resource == resource,
        )
        .limit(1)
    )
    return result.scalar_one_or_none() is not None


async def get_user_permissions(session: AsyncSession, user_id: uuid.UUID) -> set[str]:
    if await is_admin(session, user_id):
        result = await session.execute(select(Permission.action, Permission.resource))
    else:
        result = await session.execute(
            select(Permission.action, Permission.resource)
            .join(RolePermission, RolePermission.permission_id == Permission.id)
            .join(UserRoleLink, UserRoleLink.role_id == RolePermission.role_id)
            .where(UserRoleLink.user_id == user_id)
        )
    return {permission_key(action, resource) for action, resource in result.all()}


# ============================================================================
# ROLE ASSIGNMENT
# ============================================================================
async def get_role_by_name(session: AsyncSession, name: str) -> Role | None:
    result = await session.execute(select(Role).where(Role.name == name))
    return result.scalar_one_or_none()


async def set_user_roles(
    session: AsyncSession,
    user_id: uuid.UUID,
    role_ids: Iterable[uuid.UUID],
) -> None:
    """Replace the user's role set. Caller commits."""
    role_ids = list(dict.fromkeys(role_ids))
    if role_ids:
        found = await session.execute(select(Role.id).where(Role.id.in_(role_ids)))
        missing = set(role_ids) - set(found.scalars().all())
        if missing:
            raise ValueError("Unknown role id(s): " + ", ".join(sorted(str(m) for m in missing)))

    await session.execute(delete(UserRoleLink).where(UserRoleLink.user_id == user_id))
    for role_id in role_ids:
        session.add(UserRoleLink(user_id=user_id, role_id=role_id))


async def assign_default_role(session: AsyncSession, user_id: uuid.UUID, user_type: str) -> bool:
    """Attach the role named after user_type if the user lacks it. Caller commits."""
    role = await get_role_by_name(session, user_type)
    if not role:
        return False

    existing = await session.execute(
        select(UserRoleLink).where(
            UserRoleLink.user_id == user_id,
            UserRoleLink.role_id == role.id,
        )
    )
    if existing.scalar_one_or_none():
        return False

    session.add(UserRoleLink(user_id=user_id, role_id=role.id))
    return True


async def ensure_can_grant(
    session: AsyncSession,
    actor_id: uuid.UUID,
    role_ids: Iterable[uuid.UUID] | None = None,
    user_type: str | None = None,
    retyping: bool = False,
) -> None:
    """
    Raise PermissionError unless the actor may hand out role_ids / user_type.

    Only admins make admins. An explicit role set, or moving an existing
    user to another user_type, also needs update:roles, and a non-admin
    may only grant roles it holds itself.
    """
    if await is_admin(session, actor_id):
        return
    if user_type == ADMIN_ROLE:
        raise PermissionError("Only administrators can grant administrator access")
    if role_ids is None and not retyping:
        return
    if not await has_permission(session, actor_id, "update", "roles"):
        raise PermissionError(f"Insufficient permissions: {permission_key('update', 'roles')}")
    if role_ids is not None:
        held = {role.id for role in await get_user_roles(session, actor_id)}
        if set(role_ids) - held:
            raise PermissionError("Cannot grant roles you do not hold")


# ============================================================================
# ROLE MANAGEMENT
# ============================================================================
async def list_roles(session: AsyncSession) -> list[Role]:
    result = await session.execute(select(Role).order_by(Role.name))
    return list(result.scalars().all())


async def list_permissions(session: AsyncSession) -> list[Permission]:
    result = await session.execute(
        select(Permission).order_by(Permission.resource, Permission.action)
    )
    return list(result.scalars().all())


async def get_role_permissions(session: AsyncSession, role_id: uuid.UUID) -> list[Permission]:
    result = await session.execute(
        select(Permission)
        .join(RolePermission, RolePermission.permission_id == Permission.id)
        .where(RolePermission.role_id == role_id)
        .order_by(Permission.resource, Permission.action)
    )
    return list(result.scalars().all())


async def _replace_role_permissions(
    session: AsyncSession,
    role_id: uuid.UUID,
    permission_ids: Iterable[uuid.UUID],
) -> None:
    permission_ids = list(dict.fromkeys(permission_ids))
    if permission_ids:
        found = await session.execute(select(Permission.id).where(Permission.id.in_(permission_ids)))
        missing = set(permission_ids) - set(found.scalars().all())
        if missing:
            raise ValueError("Unknown permission id(s): " + ", ".join(sorted(str(m) for m in missing)))

    await session.execute(delete(RolePermission).where(RolePermission.role_id == role_id))
    for permission_id in permission_ids:
        session.add(RolePermission(role_id=role_id, permission_id=permission_id))


async def create_role(
    session: AsyncSession,
    name: str,
    description: str | None = None,
    permission_ids: Iterable[uuid.UUID] = (),
) -> Role:
    name = name.strip().lower()
    if await get_role_by_name(session, name):
        raise ValueError(f"Role '{name}' already exists")

    role = Role(name=name, description=description, is_system_role=False)
    session.add(role)
    await session.flush()

    try:
        await _replace_role_permissions(session, role.id, permission_ids)
        await session.commit()
    except (ValueError, IntegrityError):
        await session.rollback()
        raise

    await session.refresh(role)
    return role


async def update_role_permissions(
    session: AsyncSession,
    role_id: uuid.UUID,
    permission_ids: Iterable[uuid.UUID],
) -> Role:
    role = await session.get(Role, role_id)
    if not role:
        raise LookupError("Role not found")

    try:
        await _replace_role_permissions(session, role.id, permission_ids)
        await session.commit()
    except ValueError:
        await session.rollback()
        raise

    await session.refresh(role)
    return role


async def delete_role(session: AsyncSession, role_id: uuid.UUID) -> None:
    role = await session.get(Role, role_id)
    if not role:
        raise LookupError("Role not found")
    if role.is_system_role:
        raise ValueError("System roles cannot be deleted")

    # junction rows go first; SQLite does not cascade without PRAGMA foreign_keys
    await session.execute(delete(RolePermission).where(RolePermission.role_id == role.id))
    await session.execute(delete(UserRoleLink).where(UserRoleLink.role_id == role.id))
    await session.delete(role)
    await session.commit()


# ============================================================================
# CATALOGUE
# ============================================================================
async def ensure_permission_catalogue(session: AsyncSession) -> dict[str, Permission]:
    """Insert any missing catalogue permission; returns all permissions keyed 'action:resource'."""
    result = await session.execute(select(Permission))
    by_key = {permission_key(p.action, p.resource): p for p in result.scalars().all()}

    for entry in build_permission_catalogue():
        key = permission_key(entry["action"], entry["resource"])
        if key not in by_key:
            permission = Permission(**entry)
            session.add(permission)
            by_key[key] = permission

    await session.flush()
    return by_key
