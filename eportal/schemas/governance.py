from datetime import date, datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

PetitionStatus = Literal["Pending", "Under Review", "Resolved", "Rejected", "Escalated"]


# --- PETITION ---
class PetitionCreate(BaseModel):
    student_id: Optional[UUID] = None
    petition_type: str
    subject: str
    description: str
    course_id: Optional[UUID] = None
    session_id: Optional[UUID] = None
    attachments: List[str] = []
    priority: Literal["Low", "Normal", "High", "Urgent"] = "Normal"


class PetitionUpdate(BaseModel):
    subject: Optional[str] = None
    description: Optional[str] = None
    attachments: Optional[List[str]] = None
    status: Optional[PetitionStatus] = None
    priority: Optional[Literal["Low", "Normal", "High", "Urgent"]] = None
    assigned_to: Optional[UUID] = None
    resolution: Optional[str] = None
    remarks: Optional[str] = None


class PetitionRead(BaseModel):
    id: UUID
    student_id: UUID
    petition_type: str
    subject: str
    description: str
    course_id: Optional[UUID] = None
    session_id: Optional[UUID] = None
    attachments: List[str] = []
    status: str
    priority: str
    assigned_to: Optional[UUID] = None
    assigned_at: Optional[datetime] = None
    resolution: Optional[str] = None
    resolved_by: Optional[UUID] = None
    resolved_at: Optional[datetime] = None
    remarks: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- SENATE DECISION ---
class SenateDecisionBase(BaseModel):
    meeting_date: date
    decision_number: str
    title: str
    description: str
    decision_type: Optional[str] = None
    affected_students: List[str] = []
    affected_departments: List[str] = []
    status: Literal["Active", "Superseded", "Revoked"] = "Active"
    effective_date: Optional[date] = None
    document_url: Optional[str] = None


class SenateDecisionCreate(SenateDecisionBase):
    pass


class SenateDecisionUpdate(BaseModel):
    meeting_date: Optional[date] = None
    title: Optional[str] = None
    description: Optional[str] = None
    decision_type: Optional[str] = None
    affected_students: Optional[List[str]] = None
    affected_departments: Optional[List[str]] = None
    status: Optional[Literal["Active", "Superseded", "Revoked"]] = None
    effective_date: Optional[date] = None
    document_url: Optional[str] = None


class SenateDecisionRead(SenateDecisionBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
