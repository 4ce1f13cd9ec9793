from datetime import date, datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


# --- HOSTEL ---
class HostelBase(BaseModel):
    name: str
    hostel_type: Literal["Male", "Female", "Mixed"]
    location: Optional[str] = None
    total_rooms: int = Field(ge=0)
    total_beds: int = Field(ge=0)
    available_beds: int = Field(ge=0)
    description: Optional[str] = None
    is_active: bool = True


class HostelCreate(HostelBase):
    pass


class HostelUpdate(BaseModel):
    name: Optional[str] = None
    hostel_type: Optional[Literal["Male", "Female", "Mixed"]] = None
    location: Optional[str] = None
    total_rooms: Optional[int] = None
    total_beds: Optional[int] = None
    available_beds: Optional[int] = None
    description: Optional[str] = None
    is_active: Optional[bool] = None


class HostelRead(HostelBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- ROOM ---
class HostelRoomBase(BaseModel):
    hostel_id: UUID
    room_number: str
    capacity: int = Field(gt=0)
    occupied_beds: int = Field(default=0, ge=0)
    room_type: Optional[str] = None
    facilities: List[str] = []
    is_active: bool = True


class HostelRoomCreate(HostelRoomBase):
    pass


class HostelRoomUpdate(BaseModel):
    room_number: Optional[str] = None
    capacity: Optional[int] = Field(default=None, gt=0)
    occupied_beds: Optional[int] = Field(default=None, ge=0)
    room_type: Optional[str] = None
    facilities: Optional[List[str]] = None
    is_active: Optional[bool] = None


class HostelRoomRead(HostelRoomBase):
    id: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- ALLOCATION ---
class HostelAllocationCreate(BaseModel):
    student_id: Optional[UUID] = None
    hostel_id: UUID
    room_id: UUID
    session_id: UUID
    expiry_date: Optional[date] = None
    bed_space: Optional[str] = None
    status: Literal["Active", "Expired", "Vacated", "Swapped"] = "Active"


class HostelAllocationUpdate(BaseModel):
    room_id: Optional[UUID] = None
    expiry_date: Optional[date] = None
    bed_space: Optional[str] = None
    status: Optional[Literal["Active", "Expired", "Vacated", "Swapped"]] = None
    approved_by: Optional[UUID] = None
    approved_at: Optional[datetime] = None


class HostelAllocationRead(BaseModel):
    id: UUID
    student_id: UUID
    hostel_id: UUID
    room_id: UUID
    session_id: UUID
    allocation_date: date
    expiry_date: Optional[date] = None
    bed_space: Optional[str] = None
    status: str
    approved_by: Optional[UUID] = None
    approved_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
