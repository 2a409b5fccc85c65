"""Auth session repository."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import update

from fixit_admin.domain.session import AuthSession
from fixit_admin.repositories.base import BaseRepository


class SessionRepository(BaseRepository[AuthSession]):
    model = AuthSession

    async def get_active_by_token(self, token: str) -> AuthSession | None:
        """Return the live (not logged out, not expired) session for *token*."""
        now = datetime.now(timezone.utc)
        result = await self._session.execute(
            self._base_query()
            .where(AuthSession.token == token)
            .where(AuthSession.expires_at > now)
        )
        return result.scalars().first()

    async def touch(self, session_id: str) -> AuthSession | None:
        return await self.update(session_id, last_seen_at=datetime.now(timezone.utc))

    async def revoke_all_for_user(self, user_id: str) -> int:
        result = await self._session.execute(
            update(AuthSession)
            .where(AuthSession.user_id == user_id)
            .where(AuthSession.deleted_at.is_(None))
            .values(deleted_at=datetime.now(timezone.utc))
        )
        await self._session.flush()
        return result.rowcount

    async def login_history(
        self,
        *,
        offset: int,
        limit: int,
        user_id: str | None = None,
        since: datetime | None = None,
        until: datetime | None = None,
    ) -> tuple[list[AuthSession], int]:
        """All logins (including ended sessions), newest first.

        *since* is inclusive, *until* exclusive.
        """
        q = self._base_query(include_deleted=True)
        if user_id is not None:
            q = q.where(AuthSession.user_id == user_id)
        if since is not None:
            q = q.where(AuthSession.created_at >= since)
        if until is not None:
            q = q.where(AuthSession.created_at < until)
        return await self._page(q, offset=offset, limit=limit, order_by="created_at", order="desc")
