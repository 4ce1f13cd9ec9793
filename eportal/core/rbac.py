# eportal/core/rbac.py

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from fastapi import Depends, HTTPException, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.deps import get_current_user, get_db_session
from eportal.core.constants import OWNED_RESOURCES, own_action
from eportal.models.user import User
from eportal.services.rbac_service import has_permission

SCOPE_ALL = "all"
SCOPE_OWN = "own"


@dataclass
class Access:
    """The caller plus how far a granted (action, resource) reaches."""
    user: User
    scope: str = SCOPE_ALL

    @property
    def owner_id(self) -> Optional[UUID]:
        return self.user.id if self.scope == SCOPE_OWN else None


def _deny(user: User, action: str, resource: str) -> HTTPException:
    logger.warning(f"⛔ {user.email} denied {action}:{resource}")
    return HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail=f"Insufficient permissions: {action}:{resource}",
    )


def RequirePermission(action: str, resource: str):
    """
    Dependency: 401 without a session, 403 unless one of the caller's roles
    grants exactly (action, resource). Admin bypasses everything.
    """

    async def permission_checker(
        current_user: User = Depends(get_current_user),
        session: AsyncSession = Depends(get_db_session),
    ) -> User:
        if not await has_permission(session, current_user.id, action, resource):
            raise _deny(current_user, action, resource)
        return current_user

    return permission_checker


def RequireAccess(action: str, resource: str):
    """
    Like RequirePermission, but for resources with an owner column a
    "<action>_own" grant also passes, limited to the caller's own rows.
    """

    async def access_checker(
        current_user: User = Depends(get_current_user),
        session: AsyncSession = Depends(get_db_session),
    ) -> Access:
        if await has_permission(session, current_user.id, action, resource):
            return Access(current_user, SCOPE_ALL)

        if resource in OWNED_RESOURCES and await has_permission(
            session, current_user.id, own_action(action), resource
        ):
            return Access(current_user, SCOPE_OWN)

        raise _deny(current_user, action, resource)

    return access_checker
