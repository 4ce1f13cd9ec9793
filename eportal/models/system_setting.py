# eportal/models/system_setting.py

import uuid
from datetime import datetime
from typing import Optional

from sqlmodel import SQLModel, Field

from eportal.core.timeutils import utcnow


class SystemSetting(SQLModel, table=True):
    __tablename__ = "system_settings"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    setting_key: str = Field(max_length=100, unique=True, index=True)
    setting_value: str
    setting_type: str = Field(max_length=50)  # 'string', 'number', 'boolean', 'json'
    description: Optional[str] = None
    category: Optional[str] = Field(default=None, max_length=50)  # 'Academic', 'Financial', 'Security', 'General'

    # visible to every signed-in user
    is_public: bool = Field(default=False)

    updated_by: Optional[uuid.UUID] = None
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False, sa_column_kwargs={"onupdate": utcnow})
