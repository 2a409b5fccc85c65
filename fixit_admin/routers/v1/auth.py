"""Auth router: register, login, forgot-password, logout, current user.

Everything here except logout and /me is reachable without a session.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from fixit_admin.core.response import DataResponse
from fixit_admin.core.security import current_session
from fixit_admin.db.base import get_db
from fixit_admin.domain.session import AuthSession
from fixit_admin.schemas.auth import (
    AuthUser,
    ForgotPasswordRequest,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from fixit_admin.schemas.common import MessageResponse
from fixit_admin.services.auth import AuthService, SessionService
from fixit_admin.services.backend_client import BackendClient, get_backend

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=DataResponse[AuthUser], status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    backend: BackendClient = Depends(get_backend),
    session: AsyncSession = Depends(get_db),
):
    user = await AuthService(backend, session).register(body)
    return {"data": user}


@router.post("/login", response_model=DataResponse[LoginResponse])
async def login(
    body: LoginRequest,
    request: Request,
    backend: BackendClient = Depends(get_backend),
    session: AsyncSession = Depends(get_db),
):
    result = await AuthService(backend, session).login(
        body,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    request.state.user_id = str(result.user.id)
    return {"data": result}


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    body: ForgotPasswordRequest,
    backend: BackendClient = Depends(get_backend),
    session: AsyncSession = Depends(get_db),
):
    message = await AuthService(backend, session).forgot_password(body)
    return MessageResponse(message=message)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    auth: AuthSession = Depends(current_session),
    session: AsyncSession = Depends(get_db),
):
    await SessionService(session).close(auth)


@router.get("/me", response_model=DataResponse[AuthUser])
async def me(auth: AuthSession = Depends(current_session)):
    return {
        "data": AuthUser(id=auth.user_id, name=auth.user_name, email=auth.email, role=auth.role)
    }
