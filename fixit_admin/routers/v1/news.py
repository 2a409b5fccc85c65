"""News router (read-only)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.news import NewsItem
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.news import NewsService

router = APIRouter(prefix="/news", tags=["News"])


@router.get("", response_model=ListResponse[NewsItem])
async def list_news(
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    return listed(await NewsService(backend).list(query), NewsItem)


@router.get("/{news_id}", response_model=DataResponse[NewsItem])
async def get_news(news_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": NewsItem.from_backend(await NewsService(backend).get(news_id))}
