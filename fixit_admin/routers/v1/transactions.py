"""Transaction list + detail router."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.transaction import Transaction
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.transactions import TransactionService

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.get("", response_model=ListResponse[Transaction])
async def list_transactions(
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    """List transactions. Tabs: all | successful | pending. Search on payer and purpose."""
    result = await TransactionService(backend).list(query)
    return listed(result, Transaction)


@router.get("/{transaction_id}", response_model=DataResponse[Transaction])
async def get_transaction(transaction_id: str, backend: BackendClient = Depends(get_backend)):
    record = await TransactionService(backend).get(transaction_id)
    return {"data": Transaction.from_backend(record)}
