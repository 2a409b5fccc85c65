"""Super-admin management router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.super_admin import AdminInvite, AdminUpdate, SuperAdmin
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.super_admin import SuperAdminService

router = APIRouter(prefix="/super-admins", tags=["Super Admins"])


@router.get("", response_model=ListResponse[SuperAdmin])
async def list_admins(
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    """Tabs: total | active | inactive."""
    return listed(await SuperAdminService(backend).list(query), SuperAdmin)


@router.post("", response_model=DataResponse[SuperAdmin], status_code=status.HTTP_201_CREATED)
async def invite_admin(body: AdminInvite, backend: BackendClient = Depends(get_backend)):
    return {"data": SuperAdmin.from_backend(await SuperAdminService(backend).invite(body))}


@router.get("/{admin_id}", response_model=DataResponse[SuperAdmin])
async def get_admin(admin_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": SuperAdmin.from_backend(await SuperAdminService(backend).get(admin_id))}


@router.put("/{admin_id}", response_model=DataResponse[SuperAdmin])
async def update_admin(
    admin_id: str,
    body: AdminUpdate,
    backend: BackendClient = Depends(get_backend),
):
    record = await SuperAdminService(backend).update(admin_id, body)
    return {"data": SuperAdmin.from_backend(record)}


@router.delete("/{admin_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_admin(admin_id: str, backend: BackendClient = Depends(get_backend)):
    await SuperAdminService(backend).delete(admin_id)
