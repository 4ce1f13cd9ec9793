# eportal/api/endpoints/auth.py

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Request, Response, status
from loguru import logger
from sqlalchemy.ext.asyncio import AsyncSession

from eportal.api.deps import get_current_user, get_db_session, get_session_token
from eportal.core.config import settings
from eportal.core.rate_limiter import AUTH_RATE_LIMIT, limiter
from eportal.models.user import User
from eportal.schemas.auth import (
    ForgotPasswordRequest,
    PermissionsResponse,
    ResetPasswordRequest,
    SessionResponse,
    SignInRequest,
    SignInResponse,
    VerifyOTPRequest,
)
from eportal.schemas.user import SignUpRequest, UserRead
from eportal.services import auth_service, rbac_service
from eportal.services.email_service import send_password_reset_email, send_welcome_email

router = APIRouter(prefix="/api/auth", tags=["Auth"])


async def build_session_payload(session: AsyncSession, user: User) -> dict:
    return {
        "user": user,
        "roles": await rbac_service.get_user_role_names(session, user.id),
        "permissions": sorted(await rbac_service.get_user_permissions(session, user.id)),
    }


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        path="/",
    )


# -------------------------------------------------------------------
# SIGN IN
# -------------------------------------------------------------------
@router.post("/sign-in", response_model=SignInResponse)
@limiter.limit(AUTH_RATE_LIMIT)
async def sign_in(
    request: Request,
    response: Response,
    payload: SignInRequest,
    session: AsyncSession = Depends(get_db_session),
):
    try:
        user, auth_session, token = await auth_service.sign_in(
            session, payload.email, payload.password, request=request
        )
    except auth_service.InvalidCredentialsError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    except auth_service.AccountLockedError as e:
        raise HTTPException(status_code=status.HTTP_423_LOCKED, detail=str(e))
    except auth_service.AccountInactiveError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))

    set_session_cookie(response, token)
    return {
        **await build_session_payload(session, user),
        "access_token": token,
        "token_type": "bearer",
        "expires_at": auth_session.expires_at,
    }


# -------------------------------------------------------------------
# SIGN UP (public, always a student)
# -------------------------------------------------------------------
@router.post("/sign-up", response_model=UserRead, status_code=status.HTTP_201_CREATED)
@limiter.limit(AUTH_RATE_LIMIT)
async def sign_up(
    request: Request,
    payload: SignUpRequest,
    background_tasks: BackgroundTasks,
    session: AsyncSession = Depends(get_db_session),
):
    if not settings.ALLOW_SIGN_UP:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Sign-up is disabled")

    data = payload.model_dump(exclude={"password"}, exclude_none=True)
    try:
        user = await auth_service.sign_up_student(session, data, payload.password, request=request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    background_tasks.add_task(
        send_welcome_email,
        {"name": user.name, "email": user.email, "user_type": user.user_type},
    )
    return user


# -------------------------------------------------------------------
# SIGN OUT
# -------------------------------------------------------------------
@router.post("/sign-out")
async def sign_out(
    request: Request,
    response: Response,
    token: str | None = Depends(get_session_token),
    session: AsyncSession = Depends(get_db_session),
):
    await auth_service.sign_out(session, token, request=request)
    response.delete_cookie(settings.SESSION_COOKIE_NAME, path="/")
    return {"success": True}


# -------------------------------------------------------------------
# CURRENT SESSION
# -------------------------------------------------------------------
@router.get("/session", response_model=SessionResponse)
async def get_session_info(
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    return await build_session_payload(session, current_user)


@router.get("/permissions", response_model=PermissionsResponse)
async def get_permissions(
    current_user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_db_session),
):
    permissions = await rbac_service.get_user_permissions(session, current_user.id)
    return {"permissions": sorted(permissions)}


# -------------------------------------------------------------------
# PASSWORD RESET
# -------------------------------------------------------------------
@router.post("/forgot-password", tags=["Password Reset"])
@limiter.limit(AUTH_RATE_LIMIT)
async def forgot_password(
    request: Request,
    payload: ForgotPasswordRequest,
    background_tasks: BackgroundTasks,
    session: AsyncSession = Depends(get_db_session),
):
    try:
        user, otp = await auth_service.request_password_reset(session, payload.email)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e).strip("'"))

    background_tasks.add_task(send_password_reset_email, user.email, otp, user.name)
    logger.info(f"Password reset requested for {user.email}")
    return {"message": "OTP sent successfully. Please check your mail."}


@router.post("/verify-reset-otp", tags=["Password Reset"])
@limiter.limit(AUTH_RATE_LIMIT)
async def verify_reset_otp(
    request: Request,
    payload: VerifyOTPRequest,
    session: AsyncSession = Depends(get_db_session),
):
    if not await auth_service.verify_reset_otp(session, payload.email, payload.otp):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid or expired OTP")
    return {"message": "OTP verified"}


@router.post("/reset-password", tags=["Password Reset"])
@limiter.limit(AUTH_RATE_LIMIT)
async def reset_password(
    request: Request,
    payload: ResetPasswordRequest,
    session: AsyncSession = Depends(get_db_session),
):
    try:
        await auth_service.finalize_password_reset(session, payload.email, payload.otp, payload.new_password)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"message": "Password has been reset successfully"}
