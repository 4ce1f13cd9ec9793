# eportal/models/audit.py

import uuid
from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class AuditLog(SQLModel, table=True):
    __tablename__ = "audit_logs"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: Optional[uuid.UUID] = Field(default=None, index=True)

    action: str = Field(max_length=100, index=True)  # 'CREATE', 'UPDATE', 'DELETE', 'LOGIN', 'LOGOUT'
    entity: str = Field(max_length=100, index=True)  # 'users', 'results', 'payments', ...
    entity_id: Optional[uuid.UUID] = None

    old_values: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    new_values: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))

    ip_address: Optional[str] = Field(default=None, max_length=50)
    user_agent: Optional[str] = None

    extra_data: Dict[str, Any] = Field(default_factory=dict, sa_column=Column("metadata", JSON))

    created_at: datetime = Field(default_factory=utcnow, nullable=False, index=True)
