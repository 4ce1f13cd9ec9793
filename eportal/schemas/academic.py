from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, model_validator


# --- FACULTY ---
class FacultyBase(BaseModel):
    name: str
    code: str
    description: Optional[str] = None
    dean_id: Optional[UUID] = None
    established_year: Optional[int] = None
    is_active: bool = True


class FacultyCreate(FacultyBase):
    pass


class FacultyUpdate(BaseModel):
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    dean_id: Optional[UUID] = None
    established_year: Optional[int] = None
    is_active: Optional[bool] = None


class FacultyRead(FacultyBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- DEPARTMENT ---
class DepartmentBase(BaseModel):
    faculty_id: UUID
    name: str
    code: str
    description: Optional[str] = None
    hod_id: Optional[UUID] = None
    established_year: Optional[int] = None
    is_active: bool = True


class DepartmentCreate(DepartmentBase):
    pass


class DepartmentUpdate(BaseModel):
    faculty_id: Optional[UUID] = None
    name: Optional[str] = None
    code: Optional[str] = None
    description: Optional[str] = None
    hod_id: Optional[UUID] = None
    established_year: Optional[int] = None
    is_active: Optional[bool] = None


class DepartmentRead(DepartmentBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- PROGRAMME ---
class ProgrammeBase(BaseModel):
    department_id: UUID
    name: str
    code: str
    degree_type: str
    duration_years: int
    minimum_credits: int
    description: Optional[str] = None
    coordinator_id: Optional[UUID] = None
    is_active: bool = True


class ProgrammeCreate(ProgrammeBase):
    pass


class ProgrammeUpdate(BaseModel):
    department_id: Optional[UUID] = None
    name: Optional[str] = None
    code: Optional[str] = None
    degree_type: Optional[str] = None
    duration_years: Optional[int] = None
    minimum_credits: Optional[int] = None
    description: Optional[str] = None
    coordinator_id: Optional[UUID] = None
    is_active: Optional[bool] = None


class ProgrammeRead(ProgrammeBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- ACADEMIC SESSION ---
class AcademicSessionBase(BaseModel):
    session_name: str
    start_date: date
    end_date: date
    is_current: bool = False
    is_active: bool = True

    first_semester_start: Optional[date] = None
    first_semester_end: Optional[date] = None
    second_semester_start: Optional[date] = None
    second_semester_end: Optional[date] = None

    course_reg_start_first: Optional[date] = None
    course_reg_end_first: Optional[date] = None
    course_reg_start_second: Optional[date] = None
    course_reg_end_second: Optional[date] = None


class AcademicSessionCreate(AcademicSessionBase):
    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AcademicSessionUpdate(BaseModel):
    session_name: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_current: Optional[bool] = None
    is_active: Optional[bool] = None

    first_semester_start: Optional[date] = None
    first_semester_end: Optional[date] = None
    second_semester_start: Optional[date] = None
    second_semester_end: Optional[date] = None

    course_reg_start_first: Optional[date] = None
    course_reg_end_first: Optional[date] = None
    course_reg_start_second: Optional[date] = None
    course_reg_end_second: Optional[date] = None


class AcademicSessionRead(AcademicSessionBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
