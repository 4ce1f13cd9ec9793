from datetime import date, datetime
from decimal import Decimal
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# --- EXAMINATION (timetable entry) ---
class ExaminationBase(BaseModel):
    course_id: UUID
    session_id: UUID
    semester: Literal["First", "Second"]
    exam_date: date
    start_time: str = Field(max_length=10)
    end_time: str = Field(max_length=10)
    duration: int = Field(gt=0)
    venue: str
    exam_type: str
    max_score: Decimal = Field(gt=0)
    instructions: Optional[str] = None
    invigilators: List[str] = []
    is_active: bool = True


class ExaminationCreate(ExaminationBase):
    pass


class ExaminationUpdate(BaseModel):
    exam_date: Optional[date] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    duration: Optional[int] = None
    venue: Optional[str] = None
    exam_type: Optional[str] = None
    max_score: Optional[Decimal] = None
    instructions: Optional[str] = None
    invigilators: Optional[List[str]] = None
    is_active: Optional[bool] = None


class ExaminationRead(ExaminationBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- EXAM CARD ---
class ExamCardCreate(BaseModel):
    student_id: Optional[UUID] = None
    session_id: UUID
    semester: Literal["First", "Second"]
    card_number: str
    expiry_date: date
    # defaults to the issuing officer
    issued_by: Optional[UUID] = None
    qr_code: Optional[str] = None


class ExamCardUpdate(BaseModel):
    expiry_date: Optional[date] = None
    status: Optional[Literal["Active", "Expired", "Revoked"]] = None
    qr_code: Optional[str] = None


class ExamCardRead(BaseModel):
    id: UUID
    student_id: UUID
    session_id: UUID
    semester: str
    card_number: str
    issued_date: date
    expiry_date: date
    status: str
    issued_by: UUID
    qr_code: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
