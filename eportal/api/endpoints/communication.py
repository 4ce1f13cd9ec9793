# eportal/api/endpoints/communication.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.crud import add_crud_routes, get_or_404
from eportal.api.deps import get_db_session
from eportal.core.rbac import Access, RequireAccess
from eportal.schemas.communication import (
    AnnouncementCreate, AnnouncementRead, AnnouncementUpdate,
    MarkAllReadResponse,
    NotificationCreate, NotificationRead, NotificationUpdate,
)
from eportal.services.communication_service import announcement_service, notification_service

announcements_router = APIRouter(prefix="/api/announcements", tags=["Announcements"])
add_crud_routes(
    announcements_router, announcement_service, AnnouncementCreate, AnnouncementUpdate, AnnouncementRead, "Announcement"
)


# =================================================================
# NOTIFICATIONS
# =================================================================
notifications_router = APIRouter(prefix="/api/notifications", tags=["Notifications"])


@notifications_router.get("/by-user/{user_id}", response_model=List[NotificationRead])
async def get_notifications_by_user(
    user_id: UUID,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "notifications")),
):
    return await notification_service.get_all(
        session, owner_id=access.owner_id, limit=limit, offset=offset, user_id=user_id
    )


@notifications_router.post("/mark-all-read", response_model=MarkAllReadResponse)
async def mark_all_notifications_read(
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("update", "notifications")),
):
    # always the caller's own inbox
    updated = await notification_service.mark_all_as_read(session, access.user.id, access.user, request=request)
    return {"success": True, "updated": updated}


@notifications_router.post("/{record_id}/read", response_model=NotificationRead)
async def mark_notification_read(
    record_id: UUID,
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("update", "notifications")),
):
    notification = await get_or_404(notification_service, session, record_id, access, "Notification")
    return await notification_service.mark_as_read(session, notification, access.user, request=request)


add_crud_routes(
    notifications_router, notification_service, NotificationCreate, NotificationUpdate, NotificationRead, "Notification"
)

routers = [announcements_router, notifications_router]
