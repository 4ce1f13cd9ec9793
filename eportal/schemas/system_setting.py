from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

SettingType = Literal["string", "number", "boolean", "json"]


class SystemSettingBase(BaseModel):
    setting_key: str
    setting_value: str
    setting_type: SettingType = "string"
    description: Optional[str] = None
    category: Optional[str] = None
    is_public: bool = False


class SystemSettingCreate(SystemSettingBase):
    pass


class SystemSettingUpdate(BaseModel):
    setting_value: Optional[str] = None
    setting_type: Optional[SettingType] = None
    description: Optional[str] = None
    category: Optional[str] = None
    is_public: Optional[bool] = None


class SystemSettingRead(SystemSettingBase):
    id: UUID
    updated_by: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
