# eportal/services/finance_service.py

from decimal import Decimal
from typing import Any, Optional
from uuid import UUID

from sqlmodel import select
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.timeutils import utcnow
from eportal.models.finance import FeeStructure, Payment, Scholarship, ScholarshipApplication
from eportal.models.user import User
from eportal.services.crud_service import CRUDService


class PaymentService(CRUDService[Payment]):

    async def before_update(self, session, obj: Payment, changes: dict[str, Any], actor: User) -> None:
        if changes.get("status") == "Confirmed" and obj.status != "Confirmed":
            if not changes.get("confirmed_at"):
                changes["confirmed_at"] = utcnow()
            if not changes.get("confirmed_by"):
                changes["confirmed_by"] = actor.id

    async def get_recent(
        self,
        session: AsyncSession,
        limit: int = 10,
        owner_id: Optional[UUID] = None,
        offset: Optional[int] = None,
    ) -> list[Payment]:
        return await self.get_all(session, owner_id=owner_id, limit=limit, offset=offset)

    async def totals_by_status(self, session: AsyncSession) -> dict[str, dict[str, Any]]:
        result = await session.execute(
            select(Payment.status, func.count(Payment.id), func.coalesce(func.sum(Payment.amount), 0))
            .group_by(Payment.status)
        )
        return {
            status: {"count": count, "amount": Decimal(str(amount))}
            for status, count, amount in result.all()
        }


class ScholarshipApplicationService(CRUDService[ScholarshipApplication]):

    async def before_update(self, session, obj: ScholarshipApplication, changes: dict[str, Any], actor: User) -> None:
        status = changes.get("status")
        if status in {"Shortlisted", "Rejected"} and not changes.get("reviewed_by"):
            changes["reviewed_by"] = actor.id
            changes["reviewed_at"] = utcnow()
        if status == "Approved" and obj.status != "Approved" and not changes.get("approved_by"):
            changes["approved_by"] = actor.id
            changes["approved_at"] = utcnow()


fee_structure_service = CRUDService(FeeStructure, "fee_structures", order_by=FeeStructure.level)
payment_service = PaymentService(
    Payment, "payments", owner_field="student_id", order_by=Payment.payment_date.desc()
)
scholarship_service = CRUDService(Scholarship, "scholarships", order_by=Scholarship.created_at.desc())
scholarship_application_service = ScholarshipApplicationService(
    ScholarshipApplication,
    "scholarship_applications",
    owner_field="student_id",
    order_by=ScholarshipApplication.created_at.desc(),
)
