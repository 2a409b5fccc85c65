"""Account directories — customers, vendors, repairers and repair companies.

The four screens behave identically: TOTAL / ACTIVE / INACTIVE tabs with
counts, a name/email search, an edit dialog and a delete button. "Online"
counts as active and "Offline" as inactive.
"""

import logging
from typing import Any

from fixit_admin.core.listing import ListView, everything, status_in
from fixit_admin.schemas.account import AccountUpdate
from fixit_admin.services.collection import CollectionService

logger = logging.getLogger(__name__)

ACTIVE_STATUSES = ("Active", "Online")
INACTIVE_STATUSES = ("Inactive", "Offline")


def account_view(*extra_search_fields: str) -> ListView:
    return ListView(
        search_fields=("name", "email", *extra_search_fields),
        tabs={
            "total": everything,
            "active": status_in(*ACTIVE_STATUSES),
            "inactive": status_in(*INACTIVE_STATUSES),
        },
        filter_fields=("status",),
    )


class DirectoryService(CollectionService):
    async def update(self, entity_id: int | str, data: AccountUpdate) -> dict[str, Any]:
        current = await self.get(entity_id)  # raises 404 if missing
        merged = {**current, **data.model_dump(by_alias=True, mode="json")}
        updated = await self._backend.update(self.resource, entity_id, merged)
        logger.info("Updated %s %s", self.resource, entity_id)
        return updated or merged

    async def delete(self, entity_id: int | str) -> None:
        await self._backend.delete(self.resource, entity_id)
        logger.info("Deleted %s %s", self.resource, entity_id)


class CustomerService(DirectoryService):
    resource = "customers"
    view = account_view()


class VendorService(DirectoryService):
    resource = "vendors"
    view = account_view("category")


class RepairerService(DirectoryService):
    resource = "repairers"
    view = account_view("specialization")


class RepairCompanyService(DirectoryService):
    resource = "repair-companies"
    view = account_view("specializations")
