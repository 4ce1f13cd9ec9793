# eportal/models/academic.py

import uuid
from datetime import date, datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


# ------------------------------------------------------------
# 1. FACULTY
# ------------------------------------------------------------
class Faculty(SQLModel, table=True):
    __tablename__ = "faculties"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=200)
    code: str = Field(max_length=20, unique=True, index=True)
    description: Optional[str] = None
    dean_id: Optional[uuid.UUID] = None
    established_year: Optional[int] = None
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


# ------------------------------------------------------------
# 2. DEPARTMENT
# ------------------------------------------------------------
class Department(SQLModel, table=True):
    __tablename__ = "departments"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    faculty_id: uuid.UUID = Field(index=True)
    name: str = Field(max_length=200)
    code: str = Field(max_length=20, unique=True, index=True)
    description: Optional[str] = None
    hod_id: Optional[uuid.UUID] = None
    established_year: Optional[int] = None
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


# ------------------------------------------------------------
# 3. PROGRAMME (e.g. B.Sc Computer Science)
# ------------------------------------------------------------
class Programme(SQLModel, table=True):
    __tablename__ = "programmes"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    department_id: uuid.UUID = Field(index=True)
    name: str = Field(max_length=200)
    code: str = Field(max_length=20, unique=True, index=True)
    degree_type: str = Field(max_length=50)  # 'B.Sc', 'B.Agric', 'M.Sc', 'PhD'
    duration_years: int
    minimum_credits: int
    description: Optional[str] = None
    coordinator_id: Optional[uuid.UUID] = None
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


# ------------------------------------------------------------
# 4. ACADEMIC SESSION ('2023/2024')
# ------------------------------------------------------------
class AcademicSession(SQLModel, table=True):
    __tablename__ = "academic_sessions"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    session_name: str = Field(max_length=50, unique=True, index=True)
    start_date: date
    end_date: date
    is_current: bool = Field(default=False)
    is_active: bool = Field(default=True)

    first_semester_start: Optional[date] = None
    first_semester_end: Optional[date] = None
    second_semester_start: Optional[date] = None
    second_semester_end: Optional[date] = None

    course_reg_start_first: Optional[date] = None
    course_reg_end_first: Optional[date] = None
    course_reg_start_second: Optional[date] = None
    course_reg_end_second: Optional[date] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})
