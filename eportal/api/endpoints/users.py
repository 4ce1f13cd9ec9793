# eportal/api/endpoints/users.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query, Request, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.deps import get_db_session
from eportal.core.rbac import RequirePermission
from eportal.models.user import User
from eportal.schemas.rbac import RoleRead
from eportal.schemas.user import UserCreate, UserRead, UserType, UserUpdate
from eportal.services import auth_service, rbac_service
from eportal.services.email_service import send_welcome_email

router = APIRouter(prefix="/api/users", tags=["Users"])


async def _get_user_or_404(session: AsyncSession, user_id: UUID) -> User:
    user = await session.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


async def _ensure_can_grant(session: AsyncSession, actor: User, **grant) -> None:
    try:
        await rbac_service.ensure_can_grant(session, actor.id, **grant)
    except PermissionError as e:
        logger.warning(f"⛔ {actor.email} refused role grant: {e}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))


# -------------------------------------------------------------------
# List users of one type
# -------------------------------------------------------------------
@router.get("/by-type/{user_type}", response_model=List[UserRead])
async def list_users_by_type(
    user_type: UserType,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "users")),
):
    return await auth_service.list_users(session, user_type=user_type, limit=limit, offset=offset)


# -------------------------------------------------------------------
# List all users
# -------------------------------------------------------------------
@router.get("", response_model=List[UserRead])
async def list_users(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "users")),
):
    return await auth_service.list_users(session, limit=limit, offset=offset)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(
    user_id: UUID,
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "users")),
):
    return await _get_user_or_404(session, user_id)


@router.get("/{user_id}/roles", response_model=List[RoleRead])
async def get_user_roles(
    user_id: UUID,
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "users")),
):
    await _get_user_or_404(session, user_id)
    return await rbac_service.get_user_roles(session, user_id)


# -------------------------------------------------------------------
# Create any user
# -------------------------------------------------------------------
@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: Request,
    data: UserCreate,
    background_tasks: BackgroundTasks,
    session: AsyncSession = Depends(get_db_session),
    current_user: User = Depends(RequirePermission("create", "users")),
):
    await _ensure_can_grant(session, current_user, role_ids=data.role_ids, user_type=data.user_type)
    fields = data.model_dump(exclude={"password", "user_type", "status", "role_ids"}, exclude_none=True)
    try:
        user = await auth_service.create_user(
            session,
            fields,
            data.password,
            user_type=data.user_type,
            status=data.status,
            role_ids=data.role_ids,
            actor_id=current_user.id,
            request=request,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    background_tasks.add_task(
        send_welcome_email,
        {"name": user.name, "email": user.email, "user_type": user.user_type},
    )
    return user


# -------------------------------------------------------------------
# Update a user (partial; role_ids replaces the role set)
# -------------------------------------------------------------------
@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    request: Request,
    user_id: UUID,
    data: UserUpdate,
    session: AsyncSession = Depends(get_db_session),
    current_user: User = Depends(RequirePermission("update", "users")),
):
    user = await _get_user_or_404(session, user_id)
    changes = data.model_dump(exclude_unset=True, exclude={"role_ids"})
    retyping = data.user_type is not None and data.user_type != user.user_type
    await _ensure_can_grant(
        session,
        current_user,
        role_ids=data.role_ids,
        user_type=data.user_type if retyping else None,
        retyping=retyping,
    )
    try:
        return await auth_service.update_user(
            session,
            user,
            changes,
            role_ids=data.role_ids,
            actor_id=current_user.id,
            request=request,
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


# -------------------------------------------------------------------
# Delete a user
# -------------------------------------------------------------------
@router.delete("/{user_id}")
async def delete_user(
    request: Request,
    user_id: UUID,
    session: AsyncSession = Depends(get_db_session),
    current_user: User = Depends(RequirePermission("delete", "users")),
):
    user = await _get_user_or_404(session, user_id)
    if user.id == current_user.id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="You cannot delete your own account")

    await auth_service.delete_user(session, user, actor_id=current_user.id, request=request)
    return {"success": True}
