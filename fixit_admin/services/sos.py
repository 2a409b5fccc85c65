"""SOS requests raised by customers who need urgent help."""

import logging
from typing import Any

from fixit_admin.core.listing import ListView, everything, status_in
from fixit_admin.schemas.sos import SosStatusUpdate
from fixit_admin.services.collection import CollectionService

logger = logging.getLogger(__name__)


class SosRequestService(CollectionService):
    resource = "sosRequests"
    view = ListView(
        search_fields=("username", "location", "issueDescription"),
        tabs={
            "all": everything,
            "pending": status_in("Pending"),
            "in-progress": status_in("In Progress"),
            "resolved": status_in("Resolved"),
            "closed": status_in("Closed"),
        },
    )

    async def update_status(self, request_id: int | str, data: SosStatusUpdate) -> dict[str, Any]:
        current = await self.get(request_id)
        changes = {"status": data.status}
        updated = await self._backend.patch(self.resource, request_id, changes)
        logger.info("SOS request %s -> %s", request_id, data.status)
        return updated or {**current, **changes}
