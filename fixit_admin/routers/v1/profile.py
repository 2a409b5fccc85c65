"""Profile & account-settings router for the signed-in admin."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fixit_admin.core.response import DataResponse
from fixit_admin.core.security import current_session
from fixit_admin.db.base import get_db
from fixit_admin.domain.session import AuthSession
from fixit_admin.schemas.common import MessageResponse
from fixit_admin.schemas.user import (
    NotificationSettings,
    NotificationToggle,
    PasswordChange,
    ProfileUpdate,
    UserProfile,
)
from fixit_admin.services.auth import SessionService
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.profile import ProfileService

router = APIRouter(prefix="/profile", tags=["Profile"])


def _svc(
    auth: AuthSession = Depends(current_session),
    backend: BackendClient = Depends(get_backend),
    session: AsyncSession = Depends(get_db),
) -> ProfileService:
    return ProfileService(backend, SessionService(session), auth)


@router.get("", response_model=DataResponse[UserProfile])
async def get_profile(svc: ProfileService = Depends(_svc)):
    return {"data": await svc.get_profile()}


@router.patch("", response_model=DataResponse[UserProfile])
async def update_profile(body: ProfileUpdate, svc: ProfileService = Depends(_svc)):
    return {"data": await svc.update_profile(body)}


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def delete_account(svc: ProfileService = Depends(_svc)):
    """Delete the admin's user record and end all of their sessions."""
    await svc.delete_account()


@router.get("/notifications", response_model=DataResponse[NotificationSettings])
async def get_notification_settings(svc: ProfileService = Depends(_svc)):
    return {"data": await svc.notification_settings()}


@router.patch("/notifications", response_model=DataResponse[NotificationSettings])
async def toggle_notification(body: NotificationToggle, svc: ProfileService = Depends(_svc)):
    return {"data": await svc.toggle_notification(body)}


@router.post("/password", response_model=MessageResponse)
async def change_password(body: PasswordChange, svc: ProfileService = Depends(_svc)):
    await svc.change_password(body)
    return MessageResponse(message="Password updated successfully")
