# eportal/models/result.py

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class Result(SQLModel, table=True):
    __tablename__ = "results"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    course_id: uuid.UUID = Field(index=True)
    session_id: uuid.UUID = Field(index=True)
    semester: str = Field(max_length=20)

    # continuous assessment
    attendance: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
    assignment: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
    test1: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
    test2: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
    practical: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
    ca_total: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)

    # examination
    exam_score: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
    total_score: Optional[Decimal] = Field(default=None, max_digits=5, decimal_places=2)
    grade: Optional[str] = Field(default=None, max_length=5)
    grade_point: Optional[Decimal] = Field(default=None, max_digits=3, decimal_places=2)
    remark: Optional[str] = Field(default=None, max_length=50)

    # processing
    uploaded_by: Optional[uuid.UUID] = None
    uploaded_at: Optional[datetime] = None
    verified_by: Optional[uuid.UUID] = None
    verified_at: Optional[datetime] = None
    approved_by: Optional[uuid.UUID] = None
    approved_at: Optional[datetime] = None
    # 'Draft', 'Submitted', 'Verified', 'Approved', 'Published'
    status: str = Field(default="Draft", max_length=50, index=True)

    is_carry_over: bool = Field(default=False)
    attempt_number: int = Field(default=1)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})
