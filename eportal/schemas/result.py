from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

ResultStatus = Literal["Draft", "Submitted", "Verified", "Approved", "Published"]
Score = Optional[Decimal]


class ResultScores(BaseModel):
    attendance: Score = Field(default=None, ge=0, le=100)
    assignment: Score = Field(default=None, ge=0, le=100)
    test1: Score = Field(default=None, ge=0, le=100)
    test2: Score = Field(default=None, ge=0, le=100)
    practical: Score = Field(default=None, ge=0, le=100)
    ca_total: Score = Field(default=None, ge=0, le=100)
    exam_score: Score = Field(default=None, ge=0, le=100)
    total_score: Score = Field(default=None, ge=0, le=100)
    grade: Optional[str] = Field(default=None, max_length=5)
    grade_point: Score = Field(default=None, ge=0, le=5)
    remark: Optional[str] = None


class ResultCreate(ResultScores):
    student_id: Optional[UUID] = None
    course_id: UUID
    session_id: UUID
    semester: Literal["First", "Second"]
    is_carry_over: bool = False
    attempt_number: int = 1


class ResultUpdate(ResultScores):
    status: Optional[ResultStatus] = None
    is_carry_over: Optional[bool] = None
    attempt_number: Optional[int] = None
    verified_by: Optional[UUID] = None
    verified_at: Optional[datetime] = None


class ResultRead(ResultScores):
    id: UUID
    student_id: UUID
    course_id: UUID
    session_id: UUID
    semester: str

    uploaded_by: Optional[UUID] = None
    uploaded_at: Optional[datetime] = None
    verified_by: Optional[UUID] = None
    verified_at: Optional[datetime] = None
    approved_by: Optional[UUID] = None
    approved_at: Optional[datetime] = None
    status: str

    is_carry_over: bool
    attempt_number: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
