# eportal/api/endpoints/governance.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.crud import add_crud_routes
from eportal.api.deps import get_db_session
from eportal.core.rbac import Access, RequireAccess
from eportal.schemas.governance import (
    PetitionCreate, PetitionRead, PetitionStatus, PetitionUpdate,
    SenateDecisionCreate, SenateDecisionRead, SenateDecisionUpdate,
)
from eportal.services.governance_service import petition_service, senate_decision_service

petitions_router = APIRouter(prefix="/api/petitions", tags=["Petitions"])


@petitions_router.get("/pending", response_model=List[PetitionRead])
async def get_pending_petitions(
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "petitions")),
):
    return await petition_service.get_pending(session, owner_id=access.owner_id, limit=limit, offset=offset)


@petitions_router.get("/by-student/{student_id}", response_model=List[PetitionRead])
async def get_petitions_by_student(
    student_id: UUID,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "petitions")),
):
    return await petition_service.get_all(
        session, owner_id=access.owner_id, limit=limit, offset=offset, student_id=student_id
    )


@petitions_router.get("/by-status/{petition_status}", response_model=List[PetitionRead])
async def get_petitions_by_status(
    petition_status: PetitionStatus,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "petitions")),
):
    return await petition_service.get_all(
        session, owner_id=access.owner_id, limit=limit, offset=offset, status=petition_status
    )


add_crud_routes(petitions_router, petition_service, PetitionCreate, PetitionUpdate, PetitionRead, "Petition")

senate_router = APIRouter(prefix="/api/senate-decisions", tags=["Senate"])
add_crud_routes(
    senate_router,
    senate_decision_service,
    SenateDecisionCreate,
    SenateDecisionUpdate,
    SenateDecisionRead,
    "Senate decision",
)

routers = [petitions_router, senate_router]
