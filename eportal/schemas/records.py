from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


# --- CLEARANCE ---
class ClearanceOffices(BaseModel):
    bursary_cleared: Optional[bool] = None
    bursary_remarks: Optional[str] = None
    library_cleared: Optional[bool] = None
    library_remarks: Optional[str] = None
    hostel_cleared: Optional[bool] = None
    hostel_remarks: Optional[str] = None
    department_cleared: Optional[bool] = None
    department_remarks: Optional[str] = None
    faculty_cleared: Optional[bool] = None
    faculty_remarks: Optional[str] = None


class ClearanceCreate(BaseModel):
    student_id: Optional[UUID] = None
    session_id: UUID
    clearance_type: str


class ClearanceUpdate(ClearanceOffices):
    status: Optional[Literal["Pending", "Completed", "Partial"]] = None


class ClearanceRead(BaseModel):
    id: UUID
    student_id: UUID
    session_id: UUID
    clearance_type: str

    bursary_cleared: bool
    bursary_cleared_by: Optional[UUID] = None
    bursary_cleared_at: Optional[datetime] = None
    bursary_remarks: Optional[str] = None
    library_cleared: bool
    library_cleared_by: Optional[UUID] = None
    library_cleared_at: Optional[datetime] = None
    library_remarks: Optional[str] = None
    hostel_cleared: bool
    hostel_cleared_by: Optional[UUID] = None
    hostel_cleared_at: Optional[datetime] = None
    hostel_remarks: Optional[str] = None
    department_cleared: bool
    department_cleared_by: Optional[UUID] = None
    department_cleared_at: Optional[datetime] = None
    department_remarks: Optional[str] = None
    faculty_cleared: bool
    faculty_cleared_by: Optional[UUID] = None
    faculty_cleared_at: Optional[datetime] = None
    faculty_remarks: Optional[str] = None

    status: str
    completed_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- DOCUMENT ---
class DocumentCreate(BaseModel):
    user_id: Optional[UUID] = None
    document_type: str
    document_name: str
    file_url: str
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    expiry_date: Optional[date] = None
    extra_data: Dict[str, Any] = {}


class DocumentUpdate(BaseModel):
    document_type: Optional[str] = None
    document_name: Optional[str] = None
    file_url: Optional[str] = None
    is_verified: Optional[bool] = None
    verification_status: Optional[Literal["Pending", "Verified", "Rejected"]] = None
    rejection_reason: Optional[str] = None
    expiry_date: Optional[date] = None
    extra_data: Optional[Dict[str, Any]] = None


class DocumentRead(BaseModel):
    id: UUID
    user_id: UUID
    document_type: str
    document_name: str
    file_url: str
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    is_verified: bool
    verified_by: Optional[UUID] = None
    verified_at: Optional[datetime] = None
    verification_status: str
    rejection_reason: Optional[str] = None
    expiry_date: Optional[date] = None
    extra_data: Dict[str, Any] = {}
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- TRANSCRIPT ---
TranscriptStatus = Literal["Pending", "Processing", "Ready", "Dispatched", "Collected"]


class TranscriptCreate(BaseModel):
    student_id: Optional[UUID] = None
    transcript_number: str
    purpose: Optional[str] = None
    destination_address: Optional[str] = None
    fee_amount: Optional[Decimal] = None


class TranscriptUpdate(BaseModel):
    purpose: Optional[str] = None
    destination_address: Optional[str] = None
    status: Optional[TranscriptStatus] = None
    processed_by: Optional[UUID] = None
    processed_at: Optional[datetime] = None
    verified_by: Optional[UUID] = None
    verified_at: Optional[datetime] = None
    collected_by: Optional[str] = None
    collection_date: Optional[date] = None
    collector_id_type: Optional[str] = None
    collector_id_number: Optional[str] = None
    fee_amount: Optional[Decimal] = None
    fee_paid: Optional[bool] = None
    payment_id: Optional[UUID] = None
    remarks: Optional[str] = None
    file_url: Optional[str] = None


class TranscriptRead(BaseModel):
    id: UUID
    student_id: UUID
    transcript_number: str
    request_date: date
    purpose: Optional[str] = None
    destination_address: Optional[str] = None
    status: str
    processed_by: Optional[UUID] = None
    processed_at: Optional[datetime] = None
    verified_by: Optional[UUID] = None
    verified_at: Optional[datetime] = None
    collected_by: Optional[str] = None
    collection_date: Optional[date] = None
    collector_id_type: Optional[str] = None
    collector_id_number: Optional[str] = None
    fee_amount: Optional[Decimal] = None
    fee_paid: bool
    payment_id: Optional[UUID] = None
    remarks: Optional[str] = None
    file_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- CERTIFICATE ---
class CertificateCreate(BaseModel):
    student_id: Optional[UUID] = None
    certificate_type: str
    certificate_number: str
    programme_id: UUID
    degree_class: Optional[str] = None
    cgpa: Decimal
    graduation_date: Optional[date] = None
    verification_code: Optional[str] = None
    remarks: Optional[str] = None
    extra_data: Dict[str, Any] = {}


class CertificateUpdate(BaseModel):
    degree_class: Optional[str] = None
    cgpa: Optional[Decimal] = None
    graduation_date: Optional[date] = None
    issued_date: Optional[date] = None
    issued_by: Optional[UUID] = None
    status: Optional[Literal["Pending", "Issued", "Revoked"]] = None
    verification_code: Optional[str] = None
    file_url: Optional[str] = None
    remarks: Optional[str] = None
    extra_data: Optional[Dict[str, Any]] = None


class CertificateRead(BaseModel):
    id: UUID
    student_id: UUID
    certificate_type: str
    certificate_number: str
    programme_id: UUID
    degree_class: Optional[str] = None
    cgpa: Decimal
    graduation_date: Optional[date] = None
    issued_date: Optional[date] = None
    issued_by: Optional[UUID] = None
    status: str
    verification_code: Optional[str] = None
    file_url: Optional[str] = None
    remarks: Optional[str] = None
    extra_data: Dict[str, Any] = {}
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- ALUMNI ---
class AlumniBase(BaseModel):
    graduation_year: int
    degree_obtained: str
    degree_class: Optional[str] = None
    final_cgpa: Optional[Decimal] = None
    current_employer: Optional[str] = None
    current_position: Optional[str] = None
    industry: Optional[str] = None
    work_email: Optional[str] = None
    willing_to_mentor: bool = False
    interested_in_recruitment: bool = False
    linkedin_url: Optional[str] = None
    achievements: Optional[str] = None
    is_active: bool = True


class AlumniCreate(AlumniBase):
    user_id: Optional[UUID] = None


class AlumniUpdate(BaseModel):
    degree_class: Optional[str] = None
    final_cgpa: Optional[Decimal] = None
    current_employer: Optional[str] = None
    current_position: Optional[str] = None
    industry: Optional[str] = None
    work_email: Optional[str] = None
    willing_to_mentor: Optional[bool] = None
    interested_in_recruitment: Optional[bool] = None
    linkedin_url: Optional[str] = None
    achievements: Optional[str] = None
    is_active: Optional[bool] = None


class AlumniRead(AlumniBase):
    id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
