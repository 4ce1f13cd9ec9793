# eportal/models/finance.py

import uuid
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class FeeStructure(SQLModel, table=True):
    __tablename__ = "fee_structures"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    session_id: uuid.UUID = Field(index=True)
    programme_id: uuid.UUID = Field(index=True)
    level: int
    study_mode: str = Field(max_length=50)

    tuition_fee: Decimal = Field(max_digits=10, decimal_places=2)
    development_levy: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    library_fee: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    sports_fee: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    medical_fee: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    exam_fee: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    technology_fee: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    departmental_dues: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    faculty_dues: Optional[Decimal] = Field(default=None, max_digits=10, decimal_places=2)
    # {"SUG": 1000, "ID_Card": 500}
    other_charges: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON))

    total_amount: Decimal = Field(max_digits=10, decimal_places=2)
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class Payment(SQLModel, table=True):
    __tablename__ = "payments"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    session_id: uuid.UUID = Field(index=True)

    reference_number: str = Field(max_length=100, unique=True, index=True)
    amount: Decimal = Field(max_digits=10, decimal_places=2)
    payment_type: str = Field(max_length=50)  # 'School Fees', 'Acceptance Fee', ...
    payment_method: str = Field(max_length=50)  # 'Remita', 'Bank Transfer', 'Card', 'Cash'
    payment_channel: Optional[str] = Field(default=None, max_length=100)

    transaction_reference: Optional[str] = Field(default=None, max_length=255)
    rrr: Optional[str] = Field(default=None, max_length=50)  # Remita Retrieval Reference
    bank_name: Optional[str] = Field(default=None, max_length=100)
    teller_number: Optional[str] = Field(default=None, max_length=50)

    # 'Pending', 'Confirmed', 'Failed', 'Reversed'
    status: str = Field(default="Pending", max_length=50, index=True)
    payment_date: datetime = Field(default_factory=utcnow)
    confirmed_at: Optional[datetime] = None
    confirmed_by: Optional[uuid.UUID] = None

    receipt_number: Optional[str] = Field(default=None, max_length=100, unique=True)
    receipt_url: Optional[str] = None

    description: Optional[str] = None
    # "metadata" is reserved on declarative classes
    extra_data: Dict[str, Any] = Field(default_factory=dict, sa_column=Column("metadata", JSON))

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class Scholarship(SQLModel, table=True):
    __tablename__ = "scholarships"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: Optional[str] = None
    sponsor: Optional[str] = Field(default=None, max_length=255)

    amount: Decimal = Field(max_digits=10, decimal_places=2)
    scholarship_type: Optional[str] = Field(default=None, max_length=100)

    min_cgpa: Optional[Decimal] = Field(default=None, max_digits=3, decimal_places=2)
    eligible_levels: List[int] = Field(default_factory=list, sa_column=Column(JSON))
    eligible_departments: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    session_id: uuid.UUID
    number_of_slots: Optional[int] = None
    available_slots: Optional[int] = None

    application_start_date: Optional[date] = None
    application_end_date: Optional[date] = None

    status: str = Field(default="Active", max_length=50)  # 'Active', 'Closed', 'Suspended'

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class ScholarshipApplication(SQLModel, table=True):
    __tablename__ = "scholarship_applications"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    scholarship_id: uuid.UUID = Field(index=True)
    student_id: uuid.UUID = Field(index=True)

    application_date: date = Field(default_factory=lambda: utcnow().date())
    statement: Optional[str] = None
    supporting_documents: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    status: str = Field(default="Pending", max_length=50)  # 'Pending', 'Shortlisted', 'Approved', 'Rejected'

    reviewed_by: Optional[uuid.UUID] = None
    reviewed_at: Optional[datetime] = None
    review_comments: Optional[str] = None

    approved_by: Optional[uuid.UUID] = None
    approved_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})
