"""Profile page and account settings of the signed-in admin."""

import logging

from fixit_admin.core.exceptions import ValidationError
from fixit_admin.domain.session import AuthSession
from fixit_admin.schemas.user import (
    NotificationSettings,
    NotificationToggle,
    PasswordChange,
    ProfileUpdate,
    UserProfile,
)
from fixit_admin.services.auth import SessionService
from fixit_admin.services.backend_client import BackendClient

logger = logging.getLogger(__name__)


class ProfileService:
    def __init__(self, backend: BackendClient, sessions: SessionService, auth: AuthSession):
        self._backend = backend
        self._sessions = sessions
        self._user_id = auth.user_id

    async def _user(self) -> dict:
        return await self._backend.get("users", self._user_id)

    async def get_profile(self) -> UserProfile:
        return UserProfile.from_backend(await self._user())

    async def update_profile(self, data: ProfileUpdate) -> UserProfile:
        changes = data.model_dump(by_alias=True, exclude_unset=True, mode="json")
        if not changes:
            return await self.get_profile()
        updated = await self._backend.patch("users", self._user_id, changes)
        return UserProfile.from_backend(updated or {**await self._user(), **changes})

    async def notification_settings(self) -> NotificationSettings:
        return NotificationSettings.from_backend(await self._user())

    async def toggle_notification(self, toggle: NotificationToggle) -> NotificationSettings:
        current = await self.notification_settings()
        values = current.model_dump(by_alias=True)
        enabled = not values[toggle.setting] if toggle.enabled is None else toggle.enabled
        await self._backend.patch("users", self._user_id, {toggle.setting: enabled})
        values[toggle.setting] = enabled
        logger.info(
            "User %s %s %s", self._user_id, "enabled" if enabled else "disabled", toggle.setting
        )
        return NotificationSettings.model_validate(values)

    async def change_password(self, data: PasswordChange) -> None:
        if data.new_password != data.confirm_password:
            raise ValidationError(
                "Passwords do not match",
                fields={"confirmPassword": "Passwords do not match"},
            )
        user = await self._user()
        if user.get("password") != data.current_password:
            raise ValidationError(
                "Current password is incorrect",
                fields={"currentPassword": "Current password is incorrect"},
            )
        await self._backend.patch("users", self._user_id, {"password": data.new_password})
        logger.info("User %s changed password", self._user_id)

    async def delete_account(self) -> None:
        await self._backend.delete("users", self._user_id)
        revoked = await self._sessions.close_all_for_user(self._user_id)
        logger.info("User %s deleted account (%d sessions revoked)", self._user_id, revoked)
