# eportal/models/course.py

import uuid
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class Course(SQLModel, table=True):
    __tablename__ = "courses"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    course_code: str = Field(max_length=20, unique=True, index=True)
    course_title: str = Field(max_length=255)
    credit_units: int
    course_type: str = Field(max_length=50)  # 'Core', 'Elective', 'General Studies', 'Practical'
    level: int
    semester: str = Field(max_length=20)  # 'First', 'Second', 'Both'
    department_id: uuid.UUID = Field(index=True)
    description: Optional[str] = None
    # [course_id, ...]
    prerequisite_courses: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class CourseAllocation(SQLModel, table=True):
    __tablename__ = "course_allocation"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    course_id: uuid.UUID = Field(index=True)
    lecturer_id: uuid.UUID = Field(index=True)
    session_id: uuid.UUID
    semester: str = Field(max_length=20)
    role: str = Field(default="Lecturer", max_length=50)  # 'Lecturer', 'Co-Lecturer', 'Lab Assistant'
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)


class CourseRegistration(SQLModel, table=True):
    __tablename__ = "course_registrations"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    course_id: uuid.UUID = Field(index=True)
    session_id: uuid.UUID = Field(index=True)
    semester: str = Field(max_length=20)
    registration_type: str = Field(default="Normal", max_length=50)  # 'Normal', 'Carry Over', 'Spillover'
    registration_date: datetime = Field(default_factory=utcnow)

    # approval chain
    adviser_approved: bool = Field(default=False)
    adviser_approved_by: Optional[uuid.UUID] = None
    adviser_approved_at: Optional[datetime] = None
    hod_approved: bool = Field(default=False)
    hod_approved_by: Optional[uuid.UUID] = None
    hod_approved_at: Optional[datetime] = None

    status: str = Field(default="Pending", max_length=50)  # 'Pending', 'Approved', 'Rejected'

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class Attendance(SQLModel, table=True):
    __tablename__ = "attendance"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    course_id: uuid.UUID = Field(index=True)
    session_id: uuid.UUID
    semester: str = Field(max_length=20)
    attendance_date: date
    status: str = Field(max_length=20)  # 'Present', 'Absent', 'Late', 'Excused'
    marked_by: uuid.UUID
    remarks: Optional[str] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
