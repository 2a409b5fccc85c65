"""Account usage router: login history and user activity."""

from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from fixit_admin.core.pagination import PaginationParams
from fixit_admin.core.response import ListResponse, paginated
from fixit_admin.db.base import get_db
from fixit_admin.schemas.account_usage import ActivityRecord, LoginRecord
from fixit_admin.services.account_usage import AccountUsageService

router = APIRouter(prefix="/account-usage", tags=["Account Usage"])


@router.get("/logins", response_model=ListResponse[LoginRecord])
async def login_history(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Logins newest first, optionally limited to a day range (inclusive)."""
    items, meta = await AccountUsageService(session).login_history(
        pagination, user_id=user_id, start_date=start_date, end_date=end_date
    )
    return paginated(items, meta)


@router.get("/activity", response_model=ListResponse[ActivityRecord])
async def user_activity(
    user_id: Optional[str] = Query(default=None, alias="userId"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Write actions recorded by the audit middleware, newest first."""
    items, meta = await AccountUsageService(session).user_activity(pagination, user_id=user_id)
    return paginated(items, meta)
