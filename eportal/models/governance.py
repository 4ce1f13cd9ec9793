# eportal/models/governance.py

import uuid
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class Petition(SQLModel, table=True):
    __tablename__ = "petitions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    petition_type: str = Field(max_length=100)  # 'Result Issue', 'Late Registration', 'Grade Appeal', ...
    subject: str = Field(max_length=255)
    description: str

    course_id: Optional[uuid.UUID] = None
    session_id: Optional[uuid.UUID] = None

    attachments: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # 'Pending', 'Under Review', 'Resolved', 'Rejected', 'Escalated'
    status: str = Field(default="Pending", max_length=50, index=True)
    priority: str = Field(default="Normal", max_length=50)

    assigned_to: Optional[uuid.UUID] = None
    assigned_at: Optional[datetime] = None

    resolution: Optional[str] = None
    resolved_by: Optional[uuid.UUID] = None
    resolved_at: Optional[datetime] = None

    remarks: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class SenateDecision(SQLModel, table=True):
    __tablename__ = "senate_decisions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    meeting_date: date
    decision_number: str = Field(max_length=100, unique=True, index=True)
    title: str = Field(max_length=255)
    description: str
    decision_type: Optional[str] = Field(default=None, max_length=100)

    affected_students: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    affected_departments: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    status: str = Field(default="Active", max_length=50)  # 'Active', 'Superseded', 'Revoked'
    effective_date: Optional[date] = None

    document_url: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})
