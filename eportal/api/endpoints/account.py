# eportal/api/endpoints/account.py
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.deps import get_current_user, get_db_session
from eportal.models.user import User
from eportal.schemas.auth import ChangePasswordRequest
from eportal.services.auth_service import change_password as change_user_password

router = APIRouter(prefix="/api/account", tags=["Account"])


@router.post("/change-password")
async def change_password(
    request: Request,
    payload: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    current = getattr(request.state, "auth_session", None)
    try:
        await change_user_password(
            session,
            current_user,
            payload.old_password,
            payload.new_password,
            current_token=current.token if current else None,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {"detail": "Password changed successfully"}
