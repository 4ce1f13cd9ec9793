# eportal/api/endpoints/finance.py

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.crud import add_crud_routes
from eportal.api.deps import get_db_session
from eportal.core.rbac import Access, RequireAccess
from eportal.schemas.finance import (
    FeeStructureCreate, FeeStructureRead, FeeStructureUpdate,
    PaymentCreate, PaymentRead, PaymentStatus, PaymentUpdate,
    ScholarshipApplicationCreate, ScholarshipApplicationRead, ScholarshipApplicationUpdate,
    ScholarshipCreate, ScholarshipRead, ScholarshipUpdate,
)
from eportal.services.finance_service import (
    fee_structure_service,
    payment_service,
    scholarship_application_service,
    scholarship_service,
)

fees_router = APIRouter(prefix="/api/fee-structures", tags=["Finance"])
add_crud_routes(fees_router, fee_structure_service, FeeStructureCreate, FeeStructureUpdate, FeeStructureRead, "Fee structure")


# =================================================================
# PAYMENTS
# =================================================================
payments_router = APIRouter(prefix="/api/payments", tags=["Finance"])


@payments_router.get("/recent", response_model=List[PaymentRead])
async def get_recent_payments(
    limit: int = Query(10, ge=1, le=100),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "payments")),
):
    return await payment_service.get_recent(session, limit=limit, owner_id=access.owner_id, offset=offset)


@payments_router.get("/by-student/{student_id}", response_model=List[PaymentRead])
async def get_payments_by_student(
    student_id: UUID,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "payments")),
):
    return await payment_service.get_all(
        session, owner_id=access.owner_id, limit=limit, offset=offset, student_id=student_id
    )


@payments_router.get("/by-session/{session_id}", response_model=List[PaymentRead])
async def get_payments_by_session(
    session_id: UUID,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "payments")),
):
    return await payment_service.get_all(
        session, owner_id=access.owner_id, limit=limit, offset=offset, session_id=session_id
    )


@payments_router.get("/by-status/{payment_status}", response_model=List[PaymentRead])
async def get_payments_by_status(
    payment_status: PaymentStatus,
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    access: Access = Depends(RequireAccess("view", "payments")),
):
    return await payment_service.get_all(
        session, owner_id=access.owner_id, limit=limit, offset=offset, status=payment_status
    )


add_crud_routes(payments_router, payment_service, PaymentCreate, PaymentUpdate, PaymentRead, "Payment")


# =================================================================
# SCHOLARSHIPS
# =================================================================
scholarships_router = APIRouter(prefix="/api/scholarships", tags=["Scholarships"])
add_crud_routes(scholarships_router, scholarship_service, ScholarshipCreate, ScholarshipUpdate, ScholarshipRead, "Scholarship")

applications_router = APIRouter(prefix="/api/scholarship-applications", tags=["Scholarships"])
add_crud_routes(
    applications_router,
    scholarship_application_service,
    ScholarshipApplicationCreate,
    ScholarshipApplicationUpdate,
    ScholarshipApplicationRead,
    "Scholarship application",
)

routers = [fees_router, payments_router, scholarships_router, applications_router]
