# eportal/services/system_setting_service.py

import json
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from eportal.models.system_setting import SystemSetting
from eportal.models.user import User
from eportal.services.crud_service import CRUDService


def check_setting_value(setting_type: str, value: str) -> None:
    """Raise ValueError when value cannot be read back as setting_type."""
    if setting_type == "number":
        try:
            float(value)
        except ValueError:
            raise ValueError(f"'{value}' is not a number")
    elif setting_type == "boolean":
        if value.lower() not in {"true", "false", "1", "0"}:
            raise ValueError(f"'{value}' is not a boolean")
    elif setting_type == "json":
        try:
            json.loads(value)
        except json.JSONDecodeError:
            raise ValueError("setting_value is not valid JSON")


class SystemSettingService(CRUDService[SystemSetting]):

    async def before_create(self, session, data: dict[str, Any], actor: User) -> None:
        check_setting_value(data.get("setting_type", "string"), data["setting_value"])
        data["updated_by"] = actor.id

    async def before_update(self, session, obj: SystemSetting, changes: dict[str, Any], actor: User) -> None:
        setting_type = changes.get("setting_type")
        setting_value = changes.get("setting_value")
        check_setting_value(
            obj.setting_type if setting_type is None else setting_type,
            obj.setting_value if setting_value is None else setting_value,
        )
        changes["updated_by"] = actor.id

    async def get_public(self, session: AsyncSession) -> list[SystemSetting]:
        return await self.get_all(session, is_public=True)


system_setting_service = SystemSettingService(
    SystemSetting, "system_settings", order_by=SystemSetting.setting_key
)
