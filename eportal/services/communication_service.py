# eportal/services/communication_service.py

from typing import Any, Optional
from uuid import UUID

from fastapi import Request
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.timeutils import utcnow
from eportal.models.communication import Announcement, Notification
from eportal.models.user import User
from eportal.services.audit_service import record_audit
from eportal.services.crud_service import CRUDService


class NotificationService(CRUDService[Notification]):

    async def before_update(self, session, obj: Notification, changes: dict[str, Any], actor: User) -> None:
        if "is_read" in changes:
            changes["read_at"] = utcnow() if changes["is_read"] else None

    async def mark_as_read(
        self,
        session: AsyncSession,
        notification: Notification,
        actor: User,
        request: Optional[Request] = None,
    ) -> Notification:
        if notification.is_read:
            return notification
        return await self.update(session, notification, {"is_read": True}, actor, request=request)

    async def mark_all_as_read(
        self,
        session: AsyncSession,
        user_id: UUID,
        actor: User,
        request: Optional[Request] = None,
    ) -> int:
        result = await session.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True, read_at=utcnow())
            .execution_options(synchronize_session=False)
        )
        record_audit(
            session,
            action="UPDATE",
            entity=self.resource,
            user_id=actor.id,
            request=request,
            details={"event": "mark_all_read", "user_id": str(user_id), "updated": result.rowcount},
        )
        await session.commit()
        return result.rowcount


announcement_service = CRUDService(
    Announcement,
    "announcements",
    order_by=(Announcement.is_pinned.desc(), Announcement.publish_date.desc()),
    actor_fields=("published_by",),
)
notification_service = NotificationService(
    Notification, "notifications", owner_field="user_id", order_by=Notification.created_at.desc()
)
