from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

PaymentStatus = Literal["Pending", "Confirmed", "Failed", "Reversed"]
Money = Optional[Decimal]


# --- FEE STRUCTURE ---
class FeeStructureBase(BaseModel):
    session_id: UUID
    programme_id: UUID
    level: int
    study_mode: str

    tuition_fee: Decimal = Field(ge=0)
    development_levy: Money = None
    library_fee: Money = None
    sports_fee: Money = None
    medical_fee: Money = None
    exam_fee: Money = None
    technology_fee: Money = None
    departmental_dues: Money = None
    faculty_dues: Money = None
    other_charges: Dict[str, Any] = {}

    total_amount: Decimal = Field(ge=0)
    is_active: bool = True


class FeeStructureCreate(FeeStructureBase):
    pass


class FeeStructureUpdate(BaseModel):
    session_id: Optional[UUID] = None
    programme_id: Optional[UUID] = None
    level: Optional[int] = None
    study_mode: Optional[str] = None

    tuition_fee: Money = None
    development_levy: Money = None
    library_fee: Money = None
    sports_fee: Money = None
    medical_fee: Money = None
    exam_fee: Money = None
    technology_fee: Money = None
    departmental_dues: Money = None
    faculty_dues: Money = None
    other_charges: Optional[Dict[str, Any]] = None

    total_amount: Money = None
    is_active: Optional[bool] = None


class FeeStructureRead(FeeStructureBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- PAYMENT ---
class PaymentCreate(BaseModel):
    student_id: Optional[UUID] = None
    session_id: UUID
    reference_number: str
    amount: Decimal = Field(gt=0)
    payment_type: str
    payment_method: str
    payment_channel: Optional[str] = None

    transaction_reference: Optional[str] = None
    rrr: Optional[str] = None
    bank_name: Optional[str] = None
    teller_number: Optional[str] = None

    description: Optional[str] = None
    extra_data: Dict[str, Any] = {}


class PaymentUpdate(BaseModel):
    amount: Optional[Decimal] = Field(default=None, gt=0)
    payment_channel: Optional[str] = None
    transaction_reference: Optional[str] = None
    rrr: Optional[str] = None
    bank_name: Optional[str] = None
    teller_number: Optional[str] = None

    status: Optional[PaymentStatus] = None
    confirmed_at: Optional[datetime] = None
    confirmed_by: Optional[UUID] = None

    receipt_number: Optional[str] = None
    receipt_url: Optional[str] = None
    description: Optional[str] = None
    extra_data: Optional[Dict[str, Any]] = None


class PaymentRead(BaseModel):
    id: UUID
    student_id: UUID
    session_id: UUID
    reference_number: str
    amount: Decimal
    payment_type: str
    payment_method: str
    payment_channel: Optional[str] = None

    transaction_reference: Optional[str] = None
    rrr: Optional[str] = None
    bank_name: Optional[str] = None
    teller_number: Optional[str] = None

    status: str
    payment_date: datetime
    confirmed_at: Optional[datetime] = None
    confirmed_by: Optional[UUID] = None

    receipt_number: Optional[str] = None
    receipt_url: Optional[str] = None
    description: Optional[str] = None
    extra_data: Dict[str, Any] = {}

    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- SCHOLARSHIP ---
class ScholarshipBase(BaseModel):
    name: str
    description: Optional[str] = None
    sponsor: Optional[str] = None
    amount: Decimal = Field(ge=0)
    scholarship_type: Optional[str] = None
    min_cgpa: Money = None
    eligible_levels: List[int] = []
    eligible_departments: List[str] = []
    session_id: UUID
    number_of_slots: Optional[int] = None
    available_slots: Optional[int] = None
    application_start_date: Optional[date] = None
    application_end_date: Optional[date] = None
    status: Literal["Active", "Closed", "Suspended"] = "Active"


class ScholarshipCreate(ScholarshipBase):
    pass


class ScholarshipUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    sponsor: Optional[str] = None
    amount: Money = None
    scholarship_type: Optional[str] = None
    min_cgpa: Money = None
    eligible_levels: Optional[List[int]] = None
    eligible_departments: Optional[List[str]] = None
    session_id: Optional[UUID] = None
    number_of_slots: Optional[int] = None
    available_slots: Optional[int] = None
    application_start_date: Optional[date] = None
    application_end_date: Optional[date] = None
    status: Optional[Literal["Active", "Closed", "Suspended"]] = None


class ScholarshipRead(ScholarshipBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- SCHOLARSHIP APPLICATION ---
class ScholarshipApplicationCreate(BaseModel):
    scholarship_id: UUID
    student_id: Optional[UUID] = None
    statement: Optional[str] = None
    supporting_documents: List[str] = []


class ScholarshipApplicationUpdate(BaseModel):
    statement: Optional[str] = None
    supporting_documents: Optional[List[str]] = None
    status: Optional[Literal["Pending", "Shortlisted", "Approved", "Rejected"]] = None
    reviewed_by: Optional[UUID] = None
    reviewed_at: Optional[datetime] = None
    review_comments: Optional[str] = None
    approved_by: Optional[UUID] = None
    approved_at: Optional[datetime] = None


class ScholarshipApplicationRead(BaseModel):
    id: UUID
    scholarship_id: UUID
    student_id: UUID
    application_date: date
    statement: Optional[str] = None
    supporting_documents: List[str] = []
    status: str
    reviewed_by: Optional[UUID] = None
    reviewed_at: Optional[datetime] = None
    review_comments: Optional[str] = None
    approved_by: Optional[UUID] = None
    approved_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
