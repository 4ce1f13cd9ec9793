from datetime import date, datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

Semester = Literal["First", "Second", "Both"]


# --- COURSE ---
class CourseBase(BaseModel):
    course_code: str
    course_title: str
    credit_units: int
    course_type: str
    level: int
    semester: Semester
    department_id: UUID
    description: Optional[str] = None
    prerequisite_courses: List[str] = []
    is_active: bool = True


class CourseCreate(CourseBase):
    pass


class CourseUpdate(BaseModel):
    course_code: Optional[str] = None
    course_title: Optional[str] = None
    credit_units: Optional[int] = None
    course_type: Optional[str] = None
    level: Optional[int] = None
    semester: Optional[Semester] = None
    department_id: Optional[UUID] = None
    description: Optional[str] = None
    prerequisite_courses: Optional[List[str]] = None
    is_active: Optional[bool] = None


class CourseRead(CourseBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- COURSE ALLOCATION (lecturer <-> course per session) ---
class CourseAllocationBase(BaseModel):
    course_id: UUID
    lecturer_id: UUID
    session_id: UUID
    semester: Semester
    role: str = "Lecturer"
    is_active: bool = True


class CourseAllocationCreate(CourseAllocationBase):
    pass


class CourseAllocationUpdate(BaseModel):
    course_id: Optional[UUID] = None
    lecturer_id: Optional[UUID] = None
    session_id: Optional[UUID] = None
    semester: Optional[Semester] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None


class CourseAllocationRead(CourseAllocationBase):
    id: UUID
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- COURSE REGISTRATION ---
class CourseRegistrationCreate(BaseModel):
    # forced to the caller for students registering themselves
    student_id: Optional[UUID] = None
    course_id: UUID
    session_id: UUID
    semester: Semester
    registration_type: str = "Normal"


class CourseRegistrationUpdate(BaseModel):
    course_id: Optional[UUID] = None
    session_id: Optional[UUID] = None
    semester: Optional[Semester] = None
    registration_type: Optional[str] = None
    adviser_approved: Optional[bool] = None
    hod_approved: Optional[bool] = None
    status: Optional[Literal["Pending", "Approved", "Rejected"]] = None


class CourseRegistrationRead(BaseModel):
    id: UUID
    student_id: UUID
    course_id: UUID
    session_id: UUID
    semester: str
    registration_type: str
    registration_date: datetime

    adviser_approved: bool
    adviser_approved_by: Optional[UUID] = None
    adviser_approved_at: Optional[datetime] = None
    hod_approved: bool
    hod_approved_by: Optional[UUID] = None
    hod_approved_at: Optional[datetime] = None

    status: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- ATTENDANCE ---
class AttendanceCreate(BaseModel):
    student_id: Optional[UUID] = None
    course_id: UUID
    session_id: UUID
    semester: Semester
    attendance_date: date
    status: Literal["Present", "Absent", "Late", "Excused"]
    # defaults to the lecturer marking it
    marked_by: Optional[UUID] = None
    remarks: Optional[str] = None


class AttendanceUpdate(BaseModel):
    attendance_date: Optional[date] = None
    status: Optional[Literal["Present", "Absent", "Late", "Excused"]] = None
    remarks: Optional[str] = None


class AttendanceRead(BaseModel):
    id: UUID
    student_id: UUID
    course_id: UUID
    session_id: UUID
    semester: str
    attendance_date: date
    status: str
    marked_by: UUID
    remarks: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
