from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

UserType = Literal["student", "lecturer", "admin", "hod", "dean", "registrar", "bursar"]
UserStatus = Literal["active", "suspended", "graduated", "withdrawn", "deferred"]


# ---------------------------------------------------------
# BASE (personal + placement fields shared by every form)
# ---------------------------------------------------------
class UserBase(BaseModel):
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=100)
    middle_name: Optional[str] = None
    last_name: str = Field(min_length=1, max_length=100)
    gender: str
    date_of_birth: str
    phone_number: str = Field(max_length=20)
    alternate_phone: Optional[str] = None
    image: Optional[str] = None

    state_of_origin: str
    lga_of_origin: str
    nationality: str = "Nigeria"
    permanent_address: str
    contact_address: str

    next_of_kin_name: Optional[str] = None
    next_of_kin_relationship: Optional[str] = None
    next_of_kin_phone: Optional[str] = None
    next_of_kin_address: Optional[str] = None

    matric_number: Optional[str] = None
    jamb_reg_number: Optional[str] = None
    mode_of_entry: Optional[str] = None
    admission_year: Optional[int] = None
    current_level: Optional[int] = None
    current_semester: Optional[str] = None
    study_mode: Optional[str] = None

    faculty_id: Optional[UUID] = None
    department_id: Optional[UUID] = None
    programme_id: Optional[UUID] = None


# ---------------------------------------------------------
# CREATE USER (admin / registrar creates any user)
# ---------------------------------------------------------
class UserCreate(UserBase):
    password: str = Field(min_length=8)
    user_type: UserType
    status: UserStatus = "active"

    staff_id: Optional[str] = None
    designation: Optional[str] = None
    employment_date: Optional[str] = None
    employment_type: Optional[str] = None
    office_location: Optional[str] = None

    # when omitted the default role named after user_type is attached
    role_ids: Optional[List[UUID]] = None


# ---------------------------------------------------------
# PUBLIC SIGN-UP (always a student)
# ---------------------------------------------------------
class SignUpRequest(UserBase):
    password: str = Field(min_length=8)


# ---------------------------------------------------------
# UPDATE USER (partial)
# ---------------------------------------------------------
class UserUpdate(BaseModel):
    email: Optional[EmailStr] = None
    user_type: Optional[UserType] = None
    status: Optional[UserStatus] = None

    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    gender: Optional[str] = None
    date_of_birth: Optional[str] = None
    phone_number: Optional[str] = None
    alternate_phone: Optional[str] = None
    image: Optional[str] = None

    state_of_origin: Optional[str] = None
    lga_of_origin: Optional[str] = None
    nationality: Optional[str] = None
    permanent_address: Optional[str] = None
    contact_address: Optional[str] = None

    next_of_kin_name: Optional[str] = None
    next_of_kin_relationship: Optional[str] = None
    next_of_kin_phone: Optional[str] = None
    next_of_kin_address: Optional[str] = None

    matric_number: Optional[str] = None
    jamb_reg_number: Optional[str] = None
    mode_of_entry: Optional[str] = None
    admission_year: Optional[int] = None
    current_level: Optional[int] = None
    current_semester: Optional[str] = None
    study_mode: Optional[str] = None

    faculty_id: Optional[UUID] = None
    department_id: Optional[UUID] = None
    programme_id: Optional[UUID] = None
    cgpa: Optional[Decimal] = None
    total_credits_earned: Optional[int] = None

    staff_id: Optional[str] = None
    designation: Optional[str] = None
    employment_date: Optional[str] = None
    employment_type: Optional[str] = None
    office_location: Optional[str] = None

    is_on_probation: Optional[bool] = None
    probation_reason: Optional[str] = None
    is_deferred: Optional[bool] = None
    deferment_start_date: Optional[str] = None
    deferment_end_date: Optional[str] = None

    # replaces the whole role set when present
    role_ids: Optional[List[UUID]] = None


# ---------------------------------------------------------
# READ USER (response, never carries secrets)
# ---------------------------------------------------------
class UserRead(UserBase):
    id: UUID
    name: str
    user_type: str
    status: str

    cgpa: Optional[Decimal] = None
    total_credits_earned: Optional[int] = 0

    staff_id: Optional[str] = None
    designation: Optional[str] = None
    employment_date: Optional[str] = None
    employment_type: Optional[str] = None
    office_location: Optional[str] = None
    is_admin: bool = False

    is_on_probation: bool = False
    probation_reason: Optional[str] = None
    is_deferred: bool = False
    deferment_start_date: Optional[str] = None
    deferment_end_date: Optional[str] = None

    email_verified: bool = False
    last_login: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
