"""E-repair router: bookings (with repairer assignment), repairs, discovery, reports."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.response import DataResponse, ListResponse, listed
from fixit_admin.routers.v1.deps import list_query
from fixit_admin.schemas.erepair import (
    Booking,
    BookingRepairer,
    Discovery,
    Repair,
    RepairerAssignment,
    RepairReport,
)
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.erepair import (
    BookingService,
    DiscoveryService,
    RepairReportService,
    RepairService,
)

router = APIRouter(prefix="/e-repair", tags=["E-repair"])

_DAY = "Day as YYYY-MM-DD"


# ------------------------------------------------------------------
# Bookings
# ------------------------------------------------------------------

@router.get("/bookings", response_model=ListResponse[Booking])
async def list_bookings(
    service_type: Optional[list[str]] = Query(default=None, alias="serviceType"),
    category: Optional[list[str]] = Query(default=None),
    booking_status: Optional[list[str]] = Query(default=None, alias="bookingStatus"),
    booking_date: Optional[str] = Query(default=None, alias="date", description=_DAY),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    """Repeat a filter parameter to select several values."""
    query.filters.update(
        {"serviceType": service_type, "category": category, "bookingStatus": booking_status}
    )
    query.day = booking_date
    return listed(await BookingService(backend).list(query), Booking)


@router.get("/repairers", response_model=DataResponse[list[BookingRepairer]])
async def list_booking_repairers(backend: BackendClient = Depends(get_backend)):
    """Candidates for the "assign repairer" dialog."""
    repairers = await BookingService(backend).available_repairers()
    return {"data": [BookingRepairer.from_backend(r) for r in repairers]}


@router.get("/bookings/{booking_id}", response_model=DataResponse[Booking])
async def get_booking(booking_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Booking.from_backend(await BookingService(backend).get(booking_id))}


@router.post("/bookings/{booking_id}/assign", response_model=DataResponse[Booking])
async def assign_repairer(
    booking_id: str,
    body: RepairerAssignment,
    backend: BackendClient = Depends(get_backend),
):
    record = await BookingService(backend).assign_repairer(booking_id, body)
    return {"data": Booking.from_backend(record)}


# ------------------------------------------------------------------
# Repairs
# ------------------------------------------------------------------

@router.get("/repairs", response_model=ListResponse[Repair])
async def list_repairs(
    repair_status: Optional[list[str]] = Query(default=None, alias="repairStatus"),
    start_date: Optional[str] = Query(default=None, alias="date", description=_DAY),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    query.filters["repairStatus"] = repair_status
    query.day = start_date
    return listed(await RepairService(backend).list(query), Repair)


@router.get("/repairs/{repair_id}", response_model=DataResponse[Repair])
async def get_repair(repair_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Repair.from_backend(await RepairService(backend).get(repair_id))}


# ------------------------------------------------------------------
# Discovery
# ------------------------------------------------------------------

@router.get("/discovery", response_model=ListResponse[Discovery])
async def list_discovery(
    payment_status: Optional[list[str]] = Query(default=None, alias="paymentStatus"),
    discovery_date: Optional[str] = Query(default=None, alias="date", description=_DAY),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    query.filters["paymentStatus"] = payment_status
    query.day = discovery_date
    return listed(await DiscoveryService(backend).list(query), Discovery)


@router.get("/discovery/{discovery_id}", response_model=DataResponse[Discovery])
async def get_discovery(discovery_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": Discovery.from_backend(await DiscoveryService(backend).get(discovery_id))}


# ------------------------------------------------------------------
# Reports
# ------------------------------------------------------------------

@router.get("/reports", response_model=ListResponse[RepairReport])
async def list_repair_reports(
    generated_date: Optional[str] = Query(default=None, alias="date", description=_DAY),
    query: ListQuery = Depends(list_query),
    backend: BackendClient = Depends(get_backend),
):
    query.day = generated_date
    return listed(await RepairReportService(backend).list(query), RepairReport)


@router.get("/reports/{report_id}", response_model=DataResponse[RepairReport])
async def get_repair_report(report_id: str, backend: BackendClient = Depends(get_backend)):
    return {"data": RepairReport.from_backend(await RepairReportService(backend).get(report_id))}
