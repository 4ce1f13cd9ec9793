# eportal/services/academic_service.py

from typing import Any, Optional
from uuid import UUID

from sqlmodel import select
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.models.academic import AcademicSession, Department, Faculty, Programme
from eportal.models.user import User
from eportal.services.crud_service import CRUDService


class AcademicSessionService(CRUDService[AcademicSession]):
    """At most one session carries is_current."""

    async def _clear_current(self, session: AsyncSession, keep_id: Optional[UUID] = None) -> None:
        stmt = update(AcademicSession).where(AcademicSession.is_current.is_(True))
        if keep_id is not None:
            stmt = stmt.where(AcademicSession.id != keep_id)
        await session.execute(stmt.values(is_current=False))

    async def before_create(self, session: AsyncSession, data: dict[str, Any], actor: User) -> None:
        if data.get("is_current"):
            await self._clear_current(session)

    async def before_update(self, session, obj: AcademicSession, changes: dict[str, Any], actor: User) -> None:
        start = changes.get("start_date") or obj.start_date
        end = changes.get("end_date") or obj.end_date
        if end < start:
            raise ValueError("end_date must not be before start_date")
        if changes.get("is_current"):
            await self._clear_current(session, keep_id=obj.id)

    async def get_current(self, session: AsyncSession) -> Optional[AcademicSession]:
        result = await session.execute(
            select(AcademicSession)
            .where(AcademicSession.is_current.is_(True))
            .order_by(AcademicSession.start_date.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def get_active(
        self, session: AsyncSession, limit: Optional[int] = None, offset: Optional[int] = None
    ) -> list[AcademicSession]:
        return await self.get_all(session, limit=limit, offset=offset, is_active=True)


faculty_service = CRUDService(Faculty, "faculties", order_by=Faculty.name)
department_service = CRUDService(Department, "departments", order_by=Department.name)
programme_service = CRUDService(Programme, "programmes", order_by=Programme.name)
academic_session_service = AcademicSessionService(
    AcademicSession, "academic_sessions", order_by=AcademicSession.start_date.desc()
)
