"""Async SQLAlchemy engine, session scope, declarative Base, and FastAPI dependency.

The dashboard keeps only its own state here (login sessions and the audit
trail); marketplace records live in the upstream backend.
"""


from collections.abc import AsyncGenerator, AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from fixit_admin.core.config import settings


def engine_options(url: str) -> dict[str, Any]:
    """Engine keyword arguments for *url*.

    SQLite files get one connection per checkout (``NullPool``), so no
    connection outlives the event loop that opened it.
    """
    if url.startswith("sqlite"):
        return {
            "connect_args": {"check_same_thread": False},
            "poolclass": NullPool,
        }
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

async_session_factory = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    """All ORM models inherit from this base."""


async def create_tables() -> None:
    """Create missing tables (local dev / tests; deployments run alembic)."""
    import fixit_admin.domain  # noqa: F401  (register models on Base.metadata)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """One unit of work: commit on success, roll back and re-raise on error."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding a request-scoped :func:`session_scope`."""
    async with session_scope() as session:
        yield session
