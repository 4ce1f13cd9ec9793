# eportal/services/course_service.py

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.timeutils import utcnow
from eportal.models.course import Attendance, Course, CourseAllocation, CourseRegistration
from eportal.models.user import User
from eportal.services.crud_service import CRUDService


class CourseRegistrationService(CRUDService[CourseRegistration]):

    async def before_update(self, session, obj: CourseRegistration, changes: dict[str, Any], actor: User) -> None:
        now = utcnow()
        # flipping an approval flag on stamps who and when
        for stage in ("adviser", "hod"):
            flag = changes.get(f"{stage}_approved")
            if flag is None:
                continue
            if flag and not getattr(obj, f"{stage}_approved"):
                changes[f"{stage}_approved_by"] = actor.id
                changes[f"{stage}_approved_at"] = now
            elif not flag:
                changes[f"{stage}_approved_by"] = None
                changes[f"{stage}_approved_at"] = None

    async def get_by_student_and_session(
        self,
        session: AsyncSession,
        student_id: UUID,
        session_id: UUID,
        semester: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[CourseRegistration]:
        return await self.get_all(
            session, limit=limit, offset=offset, student_id=student_id, session_id=session_id, semester=semester
        )

    async def get_pending_approvals(
        self,
        session: AsyncSession,
        owner_id: Optional[UUID] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> list[CourseRegistration]:
        return await self.get_all(session, owner_id=owner_id, limit=limit, offset=offset, status="Pending")


course_service = CRUDService(Course, "courses", order_by=Course.course_code)
course_allocation_service = CRUDService(
    CourseAllocation, "course_allocations", order_by=CourseAllocation.created_at.desc()
)
course_registration_service = CourseRegistrationService(
    CourseRegistration,
    "course_registrations",
    owner_field="student_id",
    order_by=CourseRegistration.registration_date.desc(),
)
attendance_service = CRUDService(
    Attendance,
    "attendance",
    owner_field="student_id",
    order_by=Attendance.attendance_date.desc(),
    actor_fields=("marked_by",),
)
