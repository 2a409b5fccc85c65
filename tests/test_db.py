from datetime import datetime, timedelta, timezone

from sqlalchemy import update
from sqlalchemy.pool import NullPool

from fixit_admin.db.base import engine_options, session_scope
from fixit_admin.domain.session import AuthSession


def test_sqlite_files_are_not_pooled():
    opts = engine_options("sqlite+aiosqlite:///./fixit_admin.db")

    assert opts["poolclass"] is NullPool
    assert opts["connect_args"] == {"check_same_thread": False}


def test_server_databases_use_a_checked_pool():
    opts = engine_options("postgresql+asyncpg://admin@db/fixit")

    assert opts["pool_pre_ping"] is True
    assert "poolclass" not in opts


def test_expired_sessions_are_rejected(client, auth_headers):
    async def _expire_all():
        async with session_scope() as session:
            await session.execute(
                update(AuthSession).values(
                    expires_at=datetime.now(timezone.utc) - timedelta(minutes=1)
                )
            )

    # Run on the app's event loop.
    client.portal.call(_expire_all)

    assert client.get("/api/v1/auth/me", headers=auth_headers).status_code == 401
