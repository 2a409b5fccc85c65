"""SOS request router."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.sos import SosRequest, SosStatusUpdate
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.sos import SosRequestService

router = APIRouter(prefix="/sos-requests", tags=["SOS"])


@router.get("", response_model=ListResponse[SosRequest])
async def list_sos_requests(
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    """Tabs: all | pending | in-progress | resolved | closed."""
    return listed(await SosRequestService(backend).list(query), SosRequest)


@router.get("/{request_id}", response_model=DataResponse[SosRequest])
async def get_sos_request(request_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": SosRequest.from_backend(await SosRequestService(backend).get(request_id))}


@router.patch("/{request_id}", response_model=DataResponse[SosRequest])
async def update_sos_status(
    request_id: str,
    body: SosStatusUpdate,
    backend: BackendClient = Depends(get_backend),
):
    record = await SosRequestService(backend).update_status(request_id, body)
    return {"data": SosRequest.from_backend(record)}
