"""Notification schemas. Backend payloads are validated strictly."""

from datetime import datetime

from fixit_admin.schemas.common import CamelModel


class Notification(CamelModel):
    id: int
    type: str
    message: str
    created_at: datetime


class NotificationFeed(CamelModel):
    """Recent notifications bucketed by day for the header dropdown."""

    today: list[Notification]
    yesterday: list[Notification]
