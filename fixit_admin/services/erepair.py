"""E-repair screens: bookings, repairs in progress, discovery findings, reports.

Bookings, repairs and discovery each have a date picker and multi-select
filters; a row matches when its value is any of the selected ones.
"""

import logging
from typing import Any

from fixit_admin.core.exceptions import NotFoundError
from fixit_admin.core.listing import ListView
from fixit_admin.schemas.erepair import RepairerAssignment
from fixit_admin.services.collection import CollectionService

logger = logging.getLogger(__name__)

ASSIGNED_STATUS = "In Progress"


class BookingService(CollectionService):
    resource = "e-repairBookings"
    repairers_resource = "booking-repairers"
    view = ListView(
        search_fields=("customerName",),
        id_fields=("repairId",),
        filter_fields=("serviceType", "category", "bookingStatus"),
        date_field="bookingDate",
    )

    async def available_repairers(self) -> list[dict[str, Any]]:
        return await self._backend.list(self.repairers_resource)

    async def assign_repairer(
        self, booking_id: int | str, assignment: RepairerAssignment
    ) -> dict[str, Any]:
        booking = await self.get(booking_id)
        wanted = str(assignment.repairer_id)
        repairer = next(
            (r for r in await self.available_repairers() if str(r.get("id")) == wanted),
            None,
        )
        if repairer is None:
            raise NotFoundError("Repairer", assignment.repairer_id)

        changes = {
            "technician": repairer.get("name"),
            "technicianId": repairer["id"],
            "bookingStatus": ASSIGNED_STATUS,
        }
        updated = await self._backend.patch(self.resource, booking_id, changes)
        logger.info("Assigned repairer %s to booking %s", repairer["id"], booking_id)
        return updated or {**booking, **changes}


class RepairService(CollectionService):
    resource = "e-repairRepairs"
    view = ListView(
        search_fields=("technician",),
        id_fields=("repairId",),
        filter_fields=("repairStatus",),
        date_field="startDate",
    )


class DiscoveryService(CollectionService):
    resource = "e-repairDiscovery"
    view = ListView(
        search_fields=("discovery",),
        id_fields=("repairId",),
        filter_fields=("paymentStatus",),
        date_field="discoveryDate",
    )


class RepairReportService(CollectionService):
    resource = "e-repairReports"
    view = ListView(
        search_fields=("reportName",),
        id_fields=("id",),
        date_field="generatedDate",
    )
