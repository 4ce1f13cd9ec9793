# eportal/models/hostel.py

import uuid
from datetime import date, datetime
from typing import List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class Hostel(SQLModel, table=True):
    __tablename__ = "hostels"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=200)
    hostel_type: str = Field(max_length=50)  # 'Male', 'Female', 'Mixed'
    location: Optional[str] = Field(default=None, max_length=255)
    total_rooms: int
    total_beds: int
    available_beds: int
    description: Optional[str] = None
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class HostelRoom(SQLModel, table=True):
    __tablename__ = "hostel_rooms"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    hostel_id: uuid.UUID = Field(index=True)
    room_number: str = Field(max_length=50)
    capacity: int
    occupied_beds: int = Field(default=0)
    room_type: Optional[str] = Field(default=None, max_length=50)  # 'Single', 'Double', 'Triple', 'Quad'
    facilities: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    is_active: bool = Field(default=True)

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class HostelAllocation(SQLModel, table=True):
    __tablename__ = "hostel_allocations"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    student_id: uuid.UUID = Field(index=True)
    hostel_id: uuid.UUID
    room_id: uuid.UUID
    session_id: uuid.UUID

    allocation_date: date = Field(default_factory=lambda: utcnow().date())
    expiry_date: Optional[date] = None
    bed_space: Optional[str] = Field(default=None, max_length=20)  # 'A', 'B', 'C', 'D'
    status: str = Field(default="Active", max_length=50)  # 'Active', 'Expired', 'Vacated', 'Swapped'

    approved_by: Optional[uuid.UUID] = None
    approved_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})
