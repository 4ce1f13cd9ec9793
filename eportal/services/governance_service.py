# eportal/services/governance_service.py

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.timeutils import utcnow
from eportal.models.governance import Petition, SenateDecision
from eportal.models.user import User
from eportal.services.crud_service import CRUDService

PETITION_CLOSED = {"Resolved", "Rejected"}


class PetitionService(CRUDService[Petition]):

    async def before_update(self, session, obj: Petition, changes: dict[str, Any], actor: User) -> None:
        now = utcnow()
        if changes.get("assigned_to") and changes["assigned_to"] != obj.assigned_to:
            changes["assigned_at"] = now
            if obj.status == "Pending" and "status" not in changes:
                changes["status"] = "Under Review"
        if changes.get("status") in PETITION_CLOSED and obj.status not in PETITION_CLOSED:
            changes["resolved_by"] = actor.id
            changes["resolved_at"] = now

    async def get_pending(
        self,
        session: AsyncSession,
        owner_id: Optional[UUID] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[Petition]:
        return await self.get_all(session, owner_id=owner_id, limit=limit, offset=offset, status="Pending")


petition_service = PetitionService(
    Petition, "petitions", owner_field="student_id", order_by=Petition.created_at.desc()
)
senate_decision_service = CRUDService(
    SenateDecision, "senate_decisions", order_by=SenateDecision.meeting_date.desc()
)
