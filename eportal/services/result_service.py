# eportal/services/result_service.py

from typing import Any, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.timeutils import utcnow
from eportal.models.result import Result
from eportal.models.user import User
from eportal.services.crud_service import CRUDService


class ResultService(CRUDService[Result]):

    async def before_create(self, session: AsyncSession, data: dict[str, Any], actor: User) -> None:
        # new uploads always start as drafts
        data["status"] = "Draft"
        data["uploaded_by"] = actor.id
        data["uploaded_at"] = utcnow()

    async def before_update(self, session, obj: Result, changes: dict[str, Any], actor: User) -> None:
        # approval only happens through approve(); publishing needs an approved row
        if changes.get("status") in {"Approved", "Published"} and obj.status != "Approved":
            raise ValueError("Use the approve action to approve a result")
        if changes.get("status") == "Verified" and not changes.get("verified_by"):
            changes["verified_by"] = actor.id
            changes["verified_at"] = utcnow()

    async def approve(
        self,
        session: AsyncSession,
        result: Result,
        actor: User,
        request: Optional[Request] = None,
    ) -> Result:
        if result.status in {"Approved", "Published"}:
            raise ValueError(f"Result is already {result.status}")
        return await self.update(
            session,
            result,
            {"status": "Approved", "approved_by": actor.id, "approved_at": utcnow()},
            actor,
            request=request,
            skip_hooks=True,
        )


result_service = ResultService(Result, "results", owner_field="student_id", order_by=Result.created_at.desc())
