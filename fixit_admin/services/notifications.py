"""Notifications list and the today/yesterday header feed."""

import logging
from datetime import datetime, timedelta, timezone

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from fixit_admin.core.exceptions import BackendUnavailableError
from fixit_admin.core.pagination import PageMeta, paginate
from fixit_admin.schemas.notification import Notification, NotificationFeed
from fixit_admin.services.backend_client import BackendClient

logger = logging.getLogger(__name__)

_notifications = TypeAdapter(list[Notification])


def _as_utc(value: datetime) -> datetime:
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


class NotificationService:
    resource = "notifications"

    def __init__(self, backend: BackendClient):
        self._backend = backend

    async def _load(self) -> list[Notification]:
        raw = await self._backend.list(self.resource)
        try:
            items = _notifications.validate_python(raw)
        except PydanticValidationError as exc:
            logger.warning("Malformed notifications payload: %s", exc)
            raise BackendUnavailableError("Backend returned malformed notifications") from exc
        items.sort(key=lambda n: _as_utc(n.created_at), reverse=True)
        return items

    async def list_notifications(
        self, page: int, limit: int, type_: str | None = None
    ) -> tuple[list[Notification], PageMeta]:
        items = await self._load()
        if type_:
            items = [n for n in items if n.type == type_]
        return paginate(items, page, limit)

    async def feed(self, reference: datetime | None = None) -> NotificationFeed:
        ref = _as_utc(reference or datetime.now(timezone.utc))
        today = ref.date()
        yesterday = today - timedelta(days=1)

        feed = NotificationFeed(today=[], yesterday=[])
        for n in await self._load():
            day = _as_utc(n.created_at).astimezone(ref.tzinfo).date()
            if day == today:
                feed.today.append(n)
            elif day == yesterday:
                feed.yesterday.append(n)
        return feed
