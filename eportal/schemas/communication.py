from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

Priority = Literal["Low", "Normal", "High", "Urgent"]


# --- ANNOUNCEMENT ---
class AnnouncementBase(BaseModel):
    title: str
    content: str
    category: str
    priority: Priority = "Normal"
    target_audience: List[str] = []
    target_faculties: List[str] = []
    target_departments: List[str] = []
    target_levels: List[int] = []
    attachments: List[str] = []
    expiry_date: Optional[datetime] = None
    is_pinned: bool = False
    is_active: bool = True


class AnnouncementCreate(AnnouncementBase):
    publish_date: Optional[datetime] = None
    # defaults to the publishing user
    published_by: Optional[UUID] = None


class AnnouncementUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[Priority] = None
    target_audience: Optional[List[str]] = None
    target_faculties: Optional[List[str]] = None
    target_departments: Optional[List[str]] = None
    target_levels: Optional[List[int]] = None
    attachments: Optional[List[str]] = None
    publish_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    is_pinned: Optional[bool] = None
    is_active: Optional[bool] = None


class AnnouncementRead(AnnouncementBase):
    id: UUID
    publish_date: datetime
    published_by: UUID
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


# --- NOTIFICATION ---
class NotificationCreate(BaseModel):
    user_id: Optional[UUID] = None
    title: str
    message: str
    type: Literal["info", "success", "warning", "error"] = "info"
    category: Optional[str] = None
    action_url: Optional[str] = None
    extra_data: Dict[str, Any] = {}


class NotificationUpdate(BaseModel):
    title: Optional[str] = None
    message: Optional[str] = None
    type: Optional[Literal["info", "success", "warning", "error"]] = None
    category: Optional[str] = None
    is_read: Optional[bool] = None
    action_url: Optional[str] = None
    extra_data: Optional[Dict[str, Any]] = None


class NotificationRead(BaseModel):
    id: UUID
    user_id: UUID
    title: str
    message: str
    type: str
    category: Optional[str] = None
    is_read: bool
    read_at: Optional[datetime] = None
    action_url: Optional[str] = None
    extra_data: Dict[str, Any] = {}
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MarkAllReadResponse(BaseModel):
    success: bool
    updated: int
