# eportal/models/records.py

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


# ------------------------------------------------------------
# CLEARANCE (one row per student/session/type, five offices)
# ------------------------------------------------------------
class Clearance(SQLModel, table=True):
    __tablename__ = "clearances"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    session_id: uuid.UUID
    clearance_type: str = Field(max_length=50)  # 'Course Registration', 'Exams', 'Graduation'

    bursary_cleared: bool = Field(default=False)
    bursary_cleared_by: Optional[uuid.UUID] = None
    bursary_cleared_at: Optional[datetime] = None
    bursary_remarks: Optional[str] = None

    library_cleared: bool = Field(default=False)
    library_cleared_by: Optional[uuid.UUID] = None
    library_cleared_at: Optional[datetime] = None
    library_remarks: Optional[str] = None

    hostel_cleared: bool = Field(default=False)
    hostel_cleared_by: Optional[uuid.UUID] = None
    hostel_cleared_at: Optional[datetime] = None
    hostel_remarks: Optional[str] = None

    department_cleared: bool = Field(default=False)
    department_cleared_by: Optional[uuid.UUID] = None
    department_cleared_at: Optional[datetime] = None
    department_remarks: Optional[str] = None

    faculty_cleared: bool = Field(default=False)
    faculty_cleared_by: Optional[uuid.UUID] = None
    faculty_cleared_at: Optional[datetime] = None
    faculty_remarks: Optional[str] = None

    status: str = Field(default="Pending", max_length=50)  # 'Pending', 'Completed', 'Partial'
    completed_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class Document(SQLModel, table=True):
    __tablename__ = "documents"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(index=True)
    document_type: str = Field(max_length=100)  # 'O Level Result', 'Birth Certificate', 'Passport', ...
    document_name: str = Field(max_length=255)
    file_url: str
    file_size: Optional[int] = None  # bytes
    mime_type: Optional[str] = Field(default=None, max_length=100)

    is_verified: bool = Field(default=False)
    verified_by: Optional[uuid.UUID] = None
    verified_at: Optional[datetime] = None
    verification_status: str = Field(default="Pending", max_length=50)  # 'Pending', 'Verified', 'Rejected'
    rejection_reason: Optional[str] = None

    expiry_date: Optional[date] = None
    extra_data: Dict[str, Any] = Field(default_factory=dict, sa_column=Column("metadata", JSON))

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class Transcript(SQLModel, table=True):
    __tablename__ = "transcripts"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    transcript_number: str = Field(max_length=100, unique=True, index=True)

    request_date: date = Field(default_factory=lambda: utcnow().date())
    purpose: Optional[str] = None
    destination_address: Optional[str] = None

    # 'Pending', 'Processing', 'Ready', 'Dispatched', 'Collected'
    status: str = Field(default="Pending", max_length=50, index=True)
    processed_by: Optional[uuid.UUID] = None
    processed_at: Optional[datetime] = None

    verified_by: Optional[uuid.UUID] = None
    verified_at: Optional[datetime] = None

    collected_by: Optional[str] = Field(default=None, max_length=255)
    collection_date: Optional[date] = None
    collector_id_type: Optional[str] = Field(default=None, max_length=50)
    collector_id_number: Optional[str] = Field(default=None, max_length=100)

    fee_amount: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    fee_paid: bool = Field(default=False)
    payment_id: Optional[uuid.UUID] = None

    remarks: Optional[str] = None
    file_url: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class Certificate(SQLModel, table=True):
    __tablename__ = "certificates"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    certificate_type: str = Field(max_length=100)  # 'Degree Certificate', 'Provisional Certificate', ...
    certificate_number: str = Field(max_length=100, unique=True, index=True)

    programme_id: uuid.UUID
    degree_class: Optional[str] = Field(default=None, max_length=50)
    cgpa: Decimal = Field(max_digits=3, decimal_places=2)
    graduation_date: Optional[date] = None

    issued_date: Optional[date] = None
    issued_by: Optional[uuid.UUID] = None

    status: str = Field(default="Pending", max_length=50)  # 'Pending', 'Issued', 'Revoked'

    verification_code: Optional[str] = Field(default=None, max_length=100, unique=True)
    file_url: Optional[str] = None

    remarks: Optional[str] = None
    extra_data: Dict[str, Any] = Field(default_factory=dict, sa_column=Column("metadata", JSON))

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class Alumni(SQLModel, table=True):
    __tablename__ = "alumni"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(unique=True, index=True)

    graduation_year: int
    degree_obtained: str = Field(max_length=100)
    degree_class: Optional[str] = Field(default=None, max_length=50)
    final_cgpa: Optional[Decimal] = Field(default=None, max_digits=3, decimal_places=2)

    current_employer: Optional[str] = Field(default=None, max_length=255)
    current_position: Optional[str] = Field(default=None, max_length=255)
    industry: Optional[str] = Field(default=None, max_length=100)
    work_email: Optional[str] = Field(default=None, max_length=255)

    willing_to_mentor: bool = Field(default=False)
    interested_in_recruitment: bool = Field(default=False)

    linkedin_url: Optional[str] = Field(default=None, max_length=255)
    achievements: Optional[str] = None

    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})
