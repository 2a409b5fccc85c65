"""Content moderation router."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.content import ContentItem, ContentReview
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.content import ContentService

router = APIRouter(prefix="/content", tags=["Content"])


@router.get("", response_model=ListResponse[ContentItem])
async def list_content(
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    """Tabs: all | pending | approved | disapproved."""
    result = await ContentService(backend).list(query)
    return listed(result, ContentItem)


@router.get("/{content_id}", response_model=DataResponse[ContentItem])
async def get_content(content_id: str, backend: BackendClient = Depends(get_backend)):
    record = await ContentService(backend).get(content_id)
    return {"data": ContentItem.from_backend(record)}


@router.post("/{content_id}/review", response_model=DataResponse[ContentItem])
async def review_content(
    content_id: str,
    body: ContentReview,
    backend: BackendClient = Depends(get_backend),
):
    """Approve a pending item, or disapprove it with a reason."""
    record = await ContentService(backend).review(content_id, body)
    return {"data": ContentItem.from_backend(record)}
