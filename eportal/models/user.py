# eportal/models/user.py

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class User(SQLModel, table=True):
    __tablename__ = "users"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    email: str = Field(max_length=255, nullable=False, index=True, unique=True)
    password_hash: str = Field(nullable=False)

    # 'student', 'lecturer', 'admin', 'hod', 'dean', 'registrar', 'bursar'
    user_type: str = Field(max_length=50, nullable=False, index=True)
    # 'active', 'suspended', 'graduated', 'withdrawn', 'deferred'
    status: str = Field(default="active", max_length=50, nullable=False)

    # --- Personal ---
    name: str = Field(nullable=False)
    first_name: str = Field(max_length=100)
    middle_name: Optional[str] = Field(default=None, max_length=100)
    last_name: str = Field(max_length=100)
    gender: str = Field(max_length=20)
    date_of_birth: str
    phone_number: str = Field(max_length=20)
    alternate_phone: Optional[str] = Field(default=None, max_length=20)
    image: Optional[str] = None

    # --- Address ---
    state_of_origin: str = Field(max_length=100)
    lga_of_origin: str = Field(max_length=100)
    nationality: str = Field(default="Nigeria", max_length=100)
    permanent_address: str
    contact_address: str

    # --- Emergency contact ---
    next_of_kin_name: Optional[str] = Field(default=None, max_length=200)
    next_of_kin_relationship: Optional[str] = Field(default=None, max_length=100)
    next_of_kin_phone: Optional[str] = Field(default=None, max_length=20)
    next_of_kin_address: Optional[str] = None

    # --- Student ---
    matric_number: Optional[str] = Field(default=None, max_length=50, unique=True)
    jamb_reg_number: Optional[str] = Field(default=None, max_length=50)
    mode_of_entry: Optional[str] = Field(default=None, max_length=50)  # 'UTME', 'Direct Entry', 'Transfer'
    admission_year: Optional[int] = None
    current_level: Optional[int] = None  # 100 .. 500
    current_semester: Optional[str] = Field(default=None, max_length=20)
    study_mode: Optional[str] = Field(default=None, max_length=50)

    # --- Academic placement ---
    faculty_id: Optional[uuid.UUID] = Field(default=None, index=True)
    department_id: Optional[uuid.UUID] = Field(default=None, index=True)
    programme_id: Optional[uuid.UUID] = None
    cgpa: Optional[Decimal] = Field(default=None, max_digits=3, decimal_places=2)
    total_credits_earned: int = Field(default=0)

    # --- Staff ---
    staff_id: Optional[str] = Field(default=None, max_length=50, unique=True)
    designation: Optional[str] = Field(default=None, max_length=100)
    employment_date: Optional[str] = None
    employment_type: Optional[str] = Field(default=None, max_length=50)
    office_location: Optional[str] = Field(default=None, max_length=200)
    is_admin: bool = Field(default=False)

    # --- Academic status ---
    is_on_probation: bool = Field(default=False)
    probation_reason: Optional[str] = None
    is_deferred: bool = Field(default=False)
    deferment_start_date: Optional[str] = None
    deferment_end_date: Optional[str] = None

    # --- Verification & security ---
    email_verified: bool = Field(default=False)
    password_reset_token: Optional[str] = Field(default=None, max_length=255)
    password_reset_expires: Optional[datetime] = None
    password_reset_attempts: int = Field(default=0)
    last_login: Optional[datetime] = None
    login_attempts: int = Field(default=0)
    account_locked_until: Optional[datetime] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": utcnow},
    )
    created_by: Optional[uuid.UUID] = None
    updated_by: Optional[uuid.UUID] = None
