"""Onboarding applications router."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.onboarding import OnboardingApplication
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.onboarding import OnboardingService

router = APIRouter(prefix="/onboarding", tags=["Onboarding"])


@router.get("", response_model=ListResponse[OnboardingApplication])
async def list_applications(
    filter_status: Optional[str] = Query(default=None, alias="status"),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    """Tabs: all | customer | repairer | repair-company | vendor."""
    query.filters["status"] = filter_status
    result = await OnboardingService(backend).list(query)
    return listed(result, OnboardingApplication)


@router.get("/{application_id}", response_model=DataResponse[OnboardingApplication])
async def get_application(application_id: str, backend: BackendClient = Depends(get_backend)):
    record = await OnboardingService(backend).get(application_id)
    return {"data": OnboardingApplication.from_backend(record)}
