# eportal/api/endpoints/system_settings.py

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.crud import add_crud_routes
from eportal.api.deps import get_current_user, get_db_session
from eportal.models.user import User
from eportal.schemas.system_setting import SystemSettingCreate, SystemSettingRead, SystemSettingUpdate
from eportal.services.system_setting_service import system_setting_service

router = APIRouter(prefix="/api/system-settings", tags=["System Settings"])


# any signed-in user
@router.get("/public", response_model=List[SystemSettingRead])
async def get_public_settings(
    session: AsyncSession = Depends(get_db_session),
    _: User = Depends(get_current_user),
):
    return await system_setting_service.get_public(session)


add_crud_routes(
    router, system_setting_service, SystemSettingCreate, SystemSettingUpdate, SystemSettingRead, "System setting"
)
