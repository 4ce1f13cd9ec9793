# eportal/api/endpoints/courses.py

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.crud import add_crud_routes
from eportal.api.deps import get_db_session
from eportal.core.rbac import Access, RequireAccess
from eportal.schemas.course import (
    AttendanceCreate, AttendanceRead, AttendanceUpdate,
    CourseAllocationCreate, CourseAllocationRead, CourseAllocationUpdate,
    CourseCreate, CourseRead, CourseUpdate,
    CourseRegistrationCreate, CourseRegistrationRead, CourseRegistrationUpdate,
)
from eportal.services.course_service import (
    attendance_service,
    course_allocation_service,
    course_registration_service,
    course_service,
)

courses_router = APIRouter(prefix="/api/courses", tags=["Courses"])
add_crud_routes(courses_router, course_service, CourseCreate, CourseUpdate, CourseRead, "Course")

allocations_router = APIRouter(prefix="/api/course-allocations", tags=["Courses"])
add_crud_routes(
    allocations_router,
    course_allocation_service,
    CourseAllocationCreate,
    CourseAllocationUpdate,
    CourseAllocationRead,
    "Course allocation",
)


# =================================================================
# COURSE REGISTRATIONS
# =================================================================
registrations_router = APIRouter(prefix="/api/course-registrations", tags=["Course Registration"])


@registrations_router.get("/pending", response_model=List[CourseRegistrationRead])
async def get_pending_registrations(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "course_registrations")),
):
    return await course_registration_service.get_pending_approvals(
        session, owner_id=access.owner_id, limit=limit, offset=offset
    )


@registrations_router.get("/by-student-and-session", response_model=List[CourseRegistrationRead])
async def get_registrations_by_student_and_session(
    student_id: UUID,
    session_id: UUID,
    semester: Optional[str] = Query(None),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "course_registrations")),
):
    if access.owner_id and access.owner_id != student_id:
        return []
    return await course_registration_service.get_by_student_and_session(
        session, student_id, session_id, semester, limit=limit, offset=offset
    )


@registrations_router.get("/by-student/{student_id}", response_model=List[CourseRegistrationRead])
async def get_registrations_by_student(
    student_id: UUID,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "course_registrations")),
):
    return await course_registration_service.get_all(
        session, owner_id=access.owner_id, limit=limit, offset=offset, student_id=student_id
    )


add_crud_routes(
    registrations_router,
    course_registration_service,
    CourseRegistrationCreate,
    CourseRegistrationUpdate,
    CourseRegistrationRead,
    "Course registration",
)


# =================================================================
# ATTENDANCE
# =================================================================
attendance_router = APIRouter(prefix="/api/attendance", tags=["Attendance"])
add_crud_routes(attendance_router, attendance_service, AttendanceCreate, AttendanceUpdate, AttendanceRead, "Attendance")

routers = [courses_router, allocations_router, registrations_router, attendance_router]
