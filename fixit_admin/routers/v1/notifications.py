"""Notifications router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fixit_admin.core.pagination import PaginationParams
from fixit_admin.core.response import DataResponse, ListResponse, paginated
from fixit_admin.schemas.notification import Notification, NotificationFeed
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.notifications import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=ListResponse[Notification])
async def list_notifications(
    type_: Optional[str] = Query(default=None, alias="type"),
    pagination: PaginationParams = Depends(),
    backend: BackendClient = Depends(get_backend),
):
    """All notifications, newest first."""
    items, meta = await NotificationService(backend).list_notifications(
        pagination.page, pagination.limit, type_
    )
    return paginated(items, meta)


@router.get("/feed", response_model=DataResponse[NotificationFeed])
async def notification_feed(backend: BackendClient = Depends(get_backend)):
    """Today's and yesterday's notifications for the header dropdown."""
    return {"data": await NotificationService(backend).feed()}
