# eportal/models/communication.py

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import Column, JSON
from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class Announcement(SQLModel, table=True):
    __tablename__ = "announcements"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    title: str = Field(max_length=255)
    content: str
    category: str = Field(max_length=50)  # 'Academic', 'Administrative', 'Events', 'Exams', 'General'
    priority: str = Field(default="Normal", max_length=50)  # 'Low', 'Normal', 'High', 'Urgent'

    # target audience
    target_audience: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    target_faculties: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    target_departments: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    target_levels: List[int] = Field(default_factory=list, sa_column=Column(JSON))

    attachments: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    publish_date: datetime = Field(default_factory=utcnow)
    expiry_date: Optional[datetime] = None
    is_pinned: bool = Field(default=False)
    is_active: bool = Field(default=True)

    published_by: uuid.UUID
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})


class Notification(SQLModel, table=True):
    __tablename__ = "notifications"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    user_id: uuid.UUID = Field(index=True)
    title: str = Field(max_length=255)
    message: str
    type: str = Field(max_length=50)  # 'info', 'success', 'warning', 'error'
    category: Optional[str] = Field(default=None, max_length=50)

    is_read: bool = Field(default=False, index=True)
    read_at: Optional[datetime] = None

    action_url: Optional[str] = None
    extra_data: Dict[str, Any] = Field(default_factory=dict, sa_column=Column("metadata", JSON))

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
