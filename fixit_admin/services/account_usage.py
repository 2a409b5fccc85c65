"""Account usage: login history and user activity, both from the local database."""

from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from fixit_admin.core.exceptions import ValidationError
from fixit_admin.core.pagination import PageMeta, PaginationParams
from fixit_admin.repositories.audit import AuditRepository
from fixit_admin.repositories.session import SessionRepository
from fixit_admin.schemas.account_usage import ActivityRecord, LoginRecord


def _day_start(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


class AccountUsageService:
    def __init__(self, session: AsyncSession):
        self._sessions = SessionRepository(session)
        self._audit = AuditRepository(session)

    async def login_history(
        self,
        pagination: PaginationParams,
        *,
        user_id: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> tuple[list[LoginRecord], PageMeta]:
        """Logins between *start_date* and *end_date*, both days inclusive."""
        if start_date and end_date and start_date > end_date:
            raise ValidationError(
                "startDate must not be after endDate",
                fields={"endDate": "End date is before start date"},
            )
        rows, total = await self._sessions.login_history(
            offset=pagination.offset,
            limit=pagination.limit,
            user_id=user_id,
            since=_day_start(start_date) if start_date else None,
            until=_day_start(end_date + timedelta(days=1)) if end_date else None,
        )
        records = [
            LoginRecord(
                id=r.id,
                user_id=r.user_id,
                user_name=r.user_name,
                email=r.email,
                ip_address=r.ip_address,
                user_agent=r.user_agent,
                login_date=r.created_at,
                last_seen_at=r.last_seen_at,
                ended_at=r.deleted_at,
            )
            for r in rows
        ]
        return records, PageMeta.build(total, pagination.page, pagination.limit)

    async def user_activity(
        self, pagination: PaginationParams, *, user_id: str | None = None
    ) -> tuple[list[ActivityRecord], PageMeta]:
        rows, total = await self._audit.list(
            offset=pagination.offset,
            limit=pagination.limit,
            order_by="created_at",
            order="desc",
            filters={"user_id": user_id},
        )
        return (
            [ActivityRecord.model_validate(r) for r in rows],
            PageMeta.build(total, pagination.page, pagination.limit),
        )
