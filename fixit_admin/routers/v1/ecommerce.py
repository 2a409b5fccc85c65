"""E-commerce router: orders, stores, products, reports."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.ecommerce import Order, Product, Report, Store
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.ecommerce import (
    OrderService,
    ProductService,
    ReportService,
    StoreService,
)

router = APIRouter(prefix="/e-commerce", tags=["E-commerce"])


# ------------------------------------------------------------------
# Orders
# ------------------------------------------------------------------

@router.get("/orders", response_model=ListResponse[Order])
async def list_orders(
    order_status: Optional[str] = Query(
        default=None, alias="orderStatus", description="All | Pending | Completed"
    ),
    order_date: Optional[str] = Query(
        default=None, alias="date", description="Order day as YYYY-MM-DD"
    ),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    query.filters["orderStatus"] = order_status
    query.day = order_date
    result = await OrderService(backend).list(query)
    return listed(result, Order)


@router.get("/orders/{order_id}", response_model=DataResponse[Order])
async def get_order(order_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Order.from_backend(await OrderService(backend).get(order_id))}


# ------------------------------------------------------------------
# Stores
# ------------------------------------------------------------------

@router.get("/stores", response_model=ListResponse[Store])
async def list_stores(
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    return listed(await StoreService(backend).list(query), Store)


@router.get("/stores/{store_id}", response_model=DataResponse[Store])
async def get_store(store_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Store.from_backend(await StoreService(backend).get(store_id))}


# ------------------------------------------------------------------
# Products
# ------------------------------------------------------------------

@router.get("/products", response_model=ListResponse[Product])
async def list_products(
    category: Optional[str] = Query(default=None),
    filter_status: Optional[str] = Query(default=None, alias="status"),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    query.filters.update({"category": category, "status": filter_status})
    return listed(await ProductService(backend).list(query), Product)


@router.get("/products/{product_id}", response_model=DataResponse[Product])
async def get_product(product_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Product.from_backend(await ProductService(backend).get(product_id))}


# ------------------------------------------------------------------
# Reports
# ------------------------------------------------------------------

@router.get("/reports", response_model=ListResponse[Report])
async def list_reports(
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    return listed(await ReportService(backend).list(query), Report)


@router.get("/reports/{report_id}", response_model=DataResponse[Report])
async def get_report(report_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Report.from_backend(await ReportService(backend).get(report_id))}
