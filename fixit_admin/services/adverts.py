"""Advertisement banners awaiting approval."""

import logging
from typing import Any

from fixit_admin.core.listing import ListView
from fixit_admin.schemas.advert import AdvertReview
from fixit_admin.services.collection import CollectionService

logger = logging.getLogger(__name__)


class AdvertService(CollectionService):
    resource = "adverts"
    view = ListView(
        search_fields=("advertiser", "category", "amountPaid"),
        filter_fields=("status",),
        date_field="dateTime",
    )

    async def review(self, advert_id: int | str, data: AdvertReview) -> dict[str, Any]:
        current = await self.get(advert_id)
        changes = {"status": data.status}
        updated = await self._backend.patch(self.resource, advert_id, changes)
        logger.info("Advert %s %s", advert_id, data.status.lower())
        return updated or {**current, **changes}
