"""Login, registration and password-reset forms."""

from datetime import datetime

from pydantic import EmailStr, Field

from fixit_admin.schemas.common import CamelModel


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6)


class RegisterRequest(CamelModel):
    name: str = Field(min_length=2)
    email: EmailStr
    password: str = Field(min_length=6)


class ForgotPasswordRequest(CamelModel):
    email: EmailStr


class AuthUser(CamelModel):
    id: int | str
    name: str
    email: str
    role: str


class LoginResponse(CamelModel):
    user: AuthUser
    token: str
    expires_at: datetime
