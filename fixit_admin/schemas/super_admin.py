"""Super-admin schemas: admin accounts, their activity log and the forms."""

from typing import Literal

from pydantic import EmailStr, Field

from fixit_admin.schemas.common import BackendRecord, CamelModel


class AdminActivity(CamelModel):
    date: str | None = None
    time: str | None = None
    activity: str | None = None
    status: str | None = None


class SuperAdmin(BackendRecord):
    name: str = ""
    email: str = ""
    role: str | None = None
    status: str | None = None  # Active | Inactive
    last_login: str | None = None
    activities: list[AdminActivity] = Field(default_factory=list)


class AdminInvite(CamelModel):
    email: EmailStr


class AdminUpdate(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    role: str = Field(min_length=1)
    status: Literal["Active", "Inactive"]
