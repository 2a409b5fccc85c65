from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.invoice import Invoice
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.invoices import InvoiceService

router = APIRouter(prefix="/invoices", tags=["Invoices"])


@router.get("", response_model=ListResponse[Invoice])
async def list_invoices(
    filter_status: Optional[str] = Query(default=None, alias="status"),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    query.filters["status"] = filter_status
    result = await InvoiceService(backend).list(query)
    return listed(result, Invoice)


@router.get("/{invoice_id}", response_model=DataResponse[Invoice])
async def get_invoice(invoice_id: str, backend: BackendClient = Depends(get_backend)):
    record = await InvoiceService(backend).get(invoice_id)
    return {"data": Invoice.from_backend(record)}
