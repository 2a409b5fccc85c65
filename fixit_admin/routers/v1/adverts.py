"""Advertisement banner router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.advert import Advert, AdvertReview
from fixit_admin.services.adverts import AdvertService
from fixit_admin.services.backend_client import BackendClient, get_backend

router = APIRouter(prefix="/adverts", tags=["Adverts"])


@router.get("", response_model=ListResponse[Advert])
async def list_adverts(
    filter_status: Optional[str] = Query(
        default=None, alias="status", description="All | Pending | Approved | Rejected"
    ),
    date_from: Optional[str] = Query(default=None, alias="dateFrom", description="First day, inclusive"),
    date_to: Optional[str] = Query(default=None, alias="dateTo", description="Last day, inclusive"),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    query.filters["status"] = filter_status
    query.since, query.until = date_from, date_to
    return listed(await AdvertService(backend).list(query), Advert)


@router.get("/{advert_id}", response_model=DataResponse[Advert])
async def get_advert(advert_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Advert.from_backend(await AdvertService(backend).get(advert_id))}


@router.patch("/{advert_id}", response_model=DataResponse[Advert])
async def review_advert(
    advert_id: str,
    body: AdvertReview,
    backend: BackendClient = Depends(get_backend),
):
    """Approve or reject a banner."""
    record = await AdvertService(backend).review(advert_id, body)
    return {"data": Advert.from_backend(record)}
