from datetime import datetime
from typing import List

from pydantic import BaseModel, EmailStr, Field

from eportal.schemas.user import UserRead


# ---------------------------------------------------------
# SIGN IN
# ---------------------------------------------------------
class SignInRequest(BaseModel):
    email: EmailStr
    password: str


class SessionResponse(BaseModel):
    user: UserRead
    roles: List[str]
    permissions: List[str]


class SignInResponse(SessionResponse):
    access_token: str
    token_type: str = "bearer"
    expires_at: datetime


class PermissionsResponse(BaseModel):
    permissions: List[str]


# ---------------------------------------------------------
# PASSWORD RESET / CHANGE
# ---------------------------------------------------------
class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class VerifyOTPRequest(BaseModel):
    email: EmailStr
    otp: str = Field(min_length=6, max_length=6)


class ResetPasswordRequest(BaseModel):
    email: EmailStr
    otp: str = Field(min_length=6, max_length=6)
    new_password: str = Field(min_length=8)


class ChangePasswordRequest(BaseModel):
    old_password: str
    new_password: str = Field(min_length=8)
