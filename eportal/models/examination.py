# eportal/models/examination.py

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class Examination(SQLModel, table=True):
    __tablename__ = "examinations"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    course_id: uuid.UUID = Field(index=True)
    session_id: uuid.UUID
    semester: str = Field(max_length=20)

    exam_date: date
    start_time: str = Field(max_length=10)
    end_time: str = Field(max_length=10)
    duration: int  # minutes

    venue: str = Field(max_length=200)
    exam_type: str = Field(max_length=50)  # 'First CA Test', 'Second CA Test', 'Final Exam'
    max_score: Decimal = Field(max_digits=5, decimal_places=2)

    instructions: Optional[str] = None
    invigilators: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class ExamCard(SQLModel, table=True):
    __tablename__ = "exam_cards"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    session_id: uuid.UUID
    semester: str = Field(max_length=20)

    card_number: str = Field(max_length=50, unique=True, index=True)
    issued_date: date = Field(default_factory=lambda: utcnow().date())
    expiry_date: date

    status: str = Field(default="Active", max_length=50)  # 'Active', 'Expired', 'Revoked'
    issued_by: uuid.UUID

    qr_code: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})
