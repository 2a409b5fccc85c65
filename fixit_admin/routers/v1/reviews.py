"""Customer review router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.review import Review, ReviewResponse, ReviewSummary
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.reviews import ReviewService

router = APIRouter(prefix="/reviews", tags=["Reviews"])


@router.get("", response_model=ListResponse[Review])
async def list_reviews(
    filter_status: Optional[str] = Query(default=None, alias="status"),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    query.filters["status"] = filter_status
    return listed(await ReviewService(backend).list(query), Review)


@router.get("/summary", response_model=DataResponse[ReviewSummary])
async def review_summary(backend: BackendClient = Depends(get_backend)):
    """Total reviews, average rating and how many have a response."""
    return {"data": await ReviewService(backend).summary()}


@router.get("/{review_id}", response_model=DataResponse[Review])
async def get_review(review_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Review.from_backend(await ReviewService(backend).get(review_id))}


@router.post("/{review_id}/response", response_model=DataResponse[Review])
async def respond_to_review(
    review_id: str,
    body: ReviewResponse,
    backend: BackendClient = Depends(get_backend),
):
    record = await ReviewService(backend).respond(review_id, body)
    return {"data": Review.from_backend(record)}


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_review(review_id: str, backend: BackendClient = Depends(get_backend)):
    await ReviewService(backend).delete(review_id)
