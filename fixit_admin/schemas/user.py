"""Profile and account-settings schemas for the signed-in admin."""

from typing import Literal

from pydantic import EmailStr, Field, field_validator

from fixit_admin.schemas.common import CamelModel

NotificationSetting = Literal[
    "messageNotification",
    "feedbackNotification",
    "userNotification",
    "contentNotification",
]


class UserProfile(CamelModel):
    """User record as shown on the profile page. Never carries the password."""

    id: int | str
    name: str
    email: str
    role: str = "admin"
    created_at: str | None = None
    last_login: str | None = None
    is_active: bool = True
    phone: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    postal_code: str | None = None
    bio: str | None = None
    profile_image: str | None = None


class ProfileUpdate(CamelModel):
    name: str | None = Field(default=None, min_length=2)
    email: EmailStr | None = None
    phone: str | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    postal_code: str | None = None
    bio: str | None = None

    # Omit a field to leave it unchanged; null would wipe it upstream.
    @field_validator("*", mode="before")
    @classmethod
    def _not_null(cls, value):
        if value is None:
            raise ValueError("Field cannot be null")
        return value


class NotificationSettings(CamelModel):
    message_notification: bool = True
    feedback_notification: bool = True
    user_notification: bool = True
    content_notification: bool = True


class NotificationToggle(CamelModel):
    setting: NotificationSetting
    # Omitted means "flip the current value".
    enabled: bool | None = None


class PasswordChange(CamelModel):
    current_password: str = Field(min_length=6)
    new_password: str = Field(min_length=6)
    confirm_password: str = Field(min_length=6)
