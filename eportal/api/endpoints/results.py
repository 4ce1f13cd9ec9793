# eportal/api/endpoints/results.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.crud import add_crud_routes, get_or_404, service_errors
from eportal.api.deps import get_db_session
from eportal.core.rbac import Access, RequireAccess
from eportal.schemas.result import ResultCreate, ResultRead, ResultUpdate
from eportal.services.result_service import result_service

router = APIRouter(prefix="/api/results", tags=["Results"])


@router.get("/by-student/{student_id}", response_model=List[ResultRead])
async def get_results_by_student(
    student_id: UUID,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "results")),
):
    return await result_service.get_all(
        session, owner_id=access.owner_id, limit=limit, offset=offset, student_id=student_id
    )


# ===================================================================
# APPROVE (HOD / Dean)
# ===================================================================
@router.post("/{record_id}/approve", response_model=ResultRead)
async def approve_result(
    record_id: UUID,
    request: Request,
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("approve", "results")),
):
    result = await get_or_404(result_service, session, record_id, access, "Result")
    with service_errors():
        return await result_service.approve(session, result, access.user, request=request)


# uploading a result is its own permission
add_crud_routes(
    router, result_service, ResultCreate, ResultUpdate, ResultRead, "Result", create_action="upload"
)
