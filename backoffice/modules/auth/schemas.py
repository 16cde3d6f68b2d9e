from typing import Any

from pydantic import EmailStr, Field

from backoffice.core.schemas import QueryModel


class LoginRequest(QueryModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RegisterRequest(QueryModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str | None = None
    last_name: str | None = None


class AuthResponse(QueryModel):
    access_token: str
    refresh_token: str | None = None
    user: dict[str, Any] | None = None


class PasswordChange(QueryModel):
    current_password: str
    new_password: str = Field(..., min_length=8)


class ForgotPasswordRequest(QueryModel):
    email: EmailStr


class ResetPasswordRequest(QueryModel):
    token: str
    new_password: str = Field(..., min_length=8)
