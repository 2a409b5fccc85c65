"""Account directory routers — customers, vendors, repairers, repair companies.

The four resources share one router shape, built by
:func:`build_directory_router`:

  GET    /{prefix}           list (tabs total|active|inactive, search, status)
  GET    /{prefix}/{id}      detail
  PUT    /{prefix}/{id}      edit dialog
  DELETE /{prefix}/{id}      delete
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.schemas.account import (
    Account,
    AccountUpdate,
    Customer,
    RepairCompany,
    Repairer,
    Vendor,
)
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.directory import (
    CustomerService,
    DirectoryService,
    RepairCompanyService,
    RepairerService,
    VendorService,
)
from fixit_admin.routers.v1.deps import list_query


def build_directory_router(
    prefix: str,
    tag: str,
    service_cls: type[DirectoryService],
    model: type[Account],
) -> APIRouter:
    router = APIRouter(prefix=prefix, tags=[tag])

    @router.get("", response_model=ListResponse[model])
    async def list_accounts(
        filter_status: Optional[str] = Query(default=None, alias="status", description="Exact status"),
        query: ListQuery = Depends(list_query),
        backend: BackendClient = Depends(get_backend),
    ):
        query.filters["status"] = filter_status
        result = await service_cls(backend).list(query)
        return listed(result, model)

    @router.get("/{entity_id}", response_model=DataResponse[model])
    async def get_account(entity_id: str, backend: BackendClient = Depends(get_backend)):
        record = await service_cls(backend).get(entity_id)
        return {"data": model.from_backend(record)}

    @router.put("/{entity_id}", response_model=DataResponse[model])
    async def update_account(
        entity_id: str,
        body: AccountUpdate,
        backend: BackendClient = Depends(get_backend),
    ):
        record = await service_cls(backend).update(entity_id, body)
        return {"data": model.from_backend(record)}

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_account(entity_id: str, backend: BackendClient = Depends(get_backend)):
        await service_cls(backend).delete(entity_id)

    return router


customers_router = build_directory_router("/customers", "Customers", CustomerService, Customer)
vendors_router = build_directory_router("/vendors", "Vendors", VendorService, Vendor)
repairers_router = build_directory_router("/repairers", "Repairers", RepairerService, Repairer)
repair_companies_router = build_directory_router(
    "/repair-companies", "Repair Companies", RepairCompanyService, RepairCompany
)
