# eportal/services/dashboard_service.py

from decimal import Decimal
from typing import Any, Optional

from sqlmodel import select
from sqlalchemy import func
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.constants import ROLE_DASHBOARDS
from eportal.models.academic import Department
from eportal.models.course import Course, CourseAllocation, CourseRegistration
from eportal.models.finance import Payment
from eportal.models.communication import Notification
from eportal.models.records import Clearance, Transcript
from eportal.models.result import Result
from eportal.models.user import User
from eportal.services.finance_service import payment_service


def dashboard_path(user_type: str) -> Optional[str]:
    return ROLE_DASHBOARDS.get(user_type)


async def _count(session: AsyncSession, model, *conditions) -> int:
    query = select(func.count()).select_from(model)
    for condition in conditions:
        query = query.where(condition)
    return (await session.execute(query)).scalar_one()


# ------------------------------------------------------------
# Per-role figures
# ------------------------------------------------------------
async def _admin_stats(session: AsyncSession, user: User) -> dict[str, Any]:
    by_type = await session.execute(select(User.user_type, func.count(User.id)).group_by(User.user_type))
    return {
        "users_by_type": {user_type: count for user_type, count in by_type.all()},
        "courses": await _count(session, Course),
        "departments": await _count(session, Department),
        "pending_registrations": await _count(session, CourseRegistration, CourseRegistration.status == "Pending"),
    }


async def _academic_head_stats(session: AsyncSession, user: User) -> dict[str, Any]:
    course_filter = []
    if user.department_id:
        course_filter.append(Course.department_id == user.department_id)
    return {
        "results_awaiting_approval": await _count(
            session, Result, Result.status.in_(["Submitted", "Verified"])
        ),
        "pending_registrations": await _count(session, CourseRegistration, CourseRegistration.status == "Pending"),
        "courses": await _count(session, Course, *course_filter),
    }


async def _lecturer_stats(session: AsyncSession, user: User) -> dict[str, Any]:
    return {
        "course_allocations": await _count(
            session, CourseAllocation,
            CourseAllocation.lecturer_id == user.id,
            CourseAllocation.is_active.is_(True),
        ),
        "results_uploaded": await _count(session, Result, Result.uploaded_by == user.id),
    }


async def _registrar_stats(session: AsyncSession, user: User) -> dict[str, Any]:
    return {
        "pending_transcripts": await _count(session, Transcript, Transcript.status == "Pending"),
        "pending_clearances": await _count(session, Clearance, Clearance.status != "Completed"),
        "students": await _count(session, User, User.user_type == "student"),
    }


async def _bursar_stats(session: AsyncSession, user: User) -> dict[str, Any]:
    totals = await payment_service.totals_by_status(session)
    confirmed = totals.get("Confirmed", {}).get("amount", Decimal("0"))
    return {
        "payments_by_status": {status: entry["count"] for status, entry in totals.items()},
        "confirmed_total": str(confirmed),
    }


async def _student_stats(session: AsyncSession, user: User) -> dict[str, Any]:
    return {
        "registrations": await _count(session, CourseRegistration, CourseRegistration.student_id == user.id),
        "results": await _count(session, Result, Result.student_id == user.id),
        "payments": await _count(session, Payment, Payment.student_id == user.id),
        "unread_notifications": await _count(
            session, Notification,
            Notification.user_id == user.id,
            Notification.is_read.is_(False),
        ),
    }


STATS_BY_TYPE = {
    "admin": _admin_stats,
    "dean": _academic_head_stats,
    "hod": _academic_head_stats,
    "lecturer": _lecturer_stats,
    "registrar": _registrar_stats,
    "bursar": _bursar_stats,
    "student": _student_stats,
}


async def get_dashboard_stats(session: AsyncSession, user: User) -> dict[str, Any]:
    builder = STATS_BY_TYPE.get(user.user_type)
    stats = await builder(session, user) if builder else {}
    return {"user_type": user.user_type, "stats": stats}
