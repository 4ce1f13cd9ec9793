# eportal/services/audit_service.py

from typing import Any, Dict, Optional
from uuid import UUID

from fastapi import Request
from sqlmodel import SQLModel, select
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.core.rate_limiter import get_real_ip
from eportal.models.audit import AuditLog

# never copied into old_values / new_values
SENSITIVE_FIELDS = {"password_hash", "password_reset_token", "token"}


def snapshot(obj: SQLModel) -> Dict[str, Any]:
    """JSON-safe copy of a row for old_values / new_values."""
    return obj.model_dump(mode="json", exclude=SENSITIVE_FIELDS)


def record_audit(
    session: AsyncSession,
    action: str,
    entity: str,
    user_id: Optional[UUID] = None,
    entity_id: Optional[UUID] = None,
    old_values: Optional[Dict[str, Any]] = None,
    new_values: Optional[Dict[str, Any]] = None,
    request: Optional[Request] = None,
    details: Optional[Dict[str, Any]] = None,
) -> AuditLog:
    """
    Adds an audit row to the caller's session.
    Nothing is committed here: the row lands in the same transaction as the
    change it describes, or not at all.
    """
    entry = AuditLog(
        user_id=user_id,
        action=action,
        entity=entity,
        entity_id=entity_id,
        old_values=old_values,
        new_values=new_values,
        ip_address=get_real_ip(request) if request is not None else None,
        user_agent=request.headers.get("user-agent") if request is not None else None,
        extra_data=details or {},
    )
    session.add(entry)
    return entry


async def list_audit_logs(
    session: AsyncSession,
    action: Optional[str] = None,
    entity: Optional[str] = None,
    user_id: Optional[UUID] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> list[AuditLog]:
    query = select(AuditLog)

    if action:
        query = query.where(AuditLog.action == action.upper())
    if entity:
        query = query.where(AuditLog.entity == entity)
    if user_id:
        query = query.where(AuditLog.user_id == user_id)

    query = query.order_by(AuditLog.created_at.desc())
    if offset:
        query = query.offset(offset)
    if limit:
        query = query.limit(limit)

    result = await session.execute(query)
    return list(result.scalars().all())
