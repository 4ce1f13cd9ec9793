# eportal/api/endpoints/logs.py

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.deps import get_db_session
from eportal.core.rbac import RequirePermission
from eportal.models.audit import AuditLog
from eportal.models.user import User
from eportal.schemas.audit import AuditLogRead
from eportal.services.audit_service import list_audit_logs

router = APIRouter(prefix="/api/audit-logs", tags=["Audit & Logs"])


# -------------------------------------------------------------------
# Audit trail (read-only, newest first)
# -------------------------------------------------------------------
@router.get("", response_model=List[AuditLogRead])
async def get_audit_logs(
    action: Optional[str] = Query(None, description="CREATE, UPDATE, DELETE, LOGIN, LOGOUT"),
    entity: Optional[str] = Query(None, description="Resource name, e.g. results"),
    user_id: Optional[UUID] = Query(None),
    limit: int = Query(100, ge=1, le=500),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "audit_logs")),
):
    return await list_audit_logs(
        session, action=action, entity=entity, user_id=user_id, limit=limit, offset=offset
    )


@router.get("/{log_id}", response_model=AuditLogRead)
async def get_audit_log(
    log_id: UUID,
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(RequirePermission("view", "audit_logs")),
):
    entry = await session.get(AuditLog, log_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Audit log not found")
    return entry
