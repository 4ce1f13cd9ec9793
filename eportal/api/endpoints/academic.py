# eportal/api/endpoints/academic.py

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.crud import add_crud_routes
from eportal.api.deps import get_db_session
from eportal.core.rbac import RequirePermission
from eportal.models.user import User
from eportal.schemas.academic import (
    AcademicSessionCreate, AcademicSessionRead, AcademicSessionUpdate,
    DepartmentCreate, DepartmentRead, DepartmentUpdate,
    FacultyCreate, FacultyRead, FacultyUpdate,
    ProgrammeCreate, ProgrammeRead, ProgrammeUpdate,
)
from eportal.services.academic_service import (
    academic_session_service,
    department_service,
    faculty_service,
    programme_service,
)

# =================================================================
# FACULTIES / DEPARTMENTS / PROGRAMMES
# =================================================================
faculties_router = APIRouter(prefix="/api/faculties", tags=["Academic Structure"])
add_crud_routes(faculties_router, faculty_service, FacultyCreate, FacultyUpdate, FacultyRead, "Faculty")

departments_router = APIRouter(prefix="/api/departments", tags=["Academic Structure"])
add_crud_routes(departments_router, department_service, DepartmentCreate, DepartmentUpdate, DepartmentRead, "Department")

programmes_router = APIRouter(prefix="/api/programmes", tags=["Academic Structure"])
add_crud_routes(programmes_router, programme_service, ProgrammeCreate, ProgrammeUpdate, ProgrammeRead, "Programme")


# =================================================================
# ACADEMIC SESSIONS
# =================================================================
sessions_router = APIRouter(prefix="/api/academic-sessions", tags=["Academic Sessions"])


@sessions_router.get("/current", response_model=AcademicSessionRead)
async def get_current_session(
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "academic_sessions")),
):
    current = await academic_session_service.get_current(session)
    if not current:
        raise HTTPException(status_code=404, detail="No current academic session")
    return current


@sessions_router.get("/active", response_model=List[AcademicSessionRead])
async def get_active_sessions(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "academic_sessions")),
):
    return await academic_session_service.get_active(session, limit=limit, offset=offset)


add_crud_routes(
    sessions_router,
    academic_session_service,
    AcademicSessionCreate,
    AcademicSessionUpdate,
    AcademicSessionRead,
    "Academic session",
)

routers = [faculties_router, departments_router, programmes_router, sessions_router]
