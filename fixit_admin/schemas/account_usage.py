"""Login history and user activity rows (served from the local database)."""

from datetime import datetime

from fixit_admin.schemas.common import CamelModel


class LoginRecord(CamelModel):
    id: str
    user_id: str
    user_name: str
    email: str
    ip_address: str | None = None
    user_agent: str | None = None
    login_date: datetime
    last_seen_at: datetime | None = None
    ended_at: datetime | None = None


class ActivityRecord(CamelModel):
    id: str
    user_id: str | None = None
    ip_address: str | None = None
    action: str
    entity_type: str
    entity_id: str | None = None
    description: str | None = None
    created_at: datetime
