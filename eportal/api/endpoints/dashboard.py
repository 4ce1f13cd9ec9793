# eportal/api/endpoints/dashboard.py

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.deps import get_current_user, get_db_session
from eportal.core.rbac import RequirePermission
from eportal.models.user import User
from eportal.schemas.dashboard import DashboardRedirect, DashboardStats
from eportal.services.dashboard_service import dashboard_path, get_dashboard_stats

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


# ===================================================================
# Where the signed-in user lands (401 sends the UI to /login)
# ===================================================================
@router.get("", response_model=DashboardRedirect)
async def get_dashboard(current_user: User = Depends(get_current_user)):
    return {"user_type": current_user.user_type, "path": dashboard_path(current_user.user_type)}


@router.get("/stats", response_model=DashboardStats)
async def get_stats(
    session: AsyncSession = Depends(get_db_session),
    current_user: User = Depends(RequirePermission("view", "dashboard")),
):
    return await get_dashboard_stats(session, current_user)
