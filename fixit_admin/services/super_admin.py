"""Super-admin accounts: list, invite, edit and remove.

An invited admin starts out inactive with a placeholder name until they
complete their own profile.
"""

import logging
from typing import Any

from fixit_admin.core.exceptions import ConflictError
from fixit_admin.core.listing import ListView, everything, status_in
from fixit_admin.schemas.super_admin import AdminInvite, AdminUpdate
from fixit_admin.services.auth import utc_now_iso
from fixit_admin.services.collection import CollectionService

logger = logging.getLogger(__name__)

INVITED_NAME = "Invited Admin"
INVITED_ROLE = "Admin"


class SuperAdminService(CollectionService):
    resource = "superAdmins"
    view = ListView(
        search_fields=("name", "email", "role"),
        tabs={
            "total": everything,
            "active": status_in("Active"),
            "inactive": status_in("Inactive"),
        },
    )

    async def invite(self, data: AdminInvite) -> dict[str, Any]:
        admins = await self._backend.list(self.resource)
        wanted = data.email.lower()
        if any(str(a.get("email", "")).lower() == wanted for a in admins):
            raise ConflictError("An admin with this email already exists")

        new_admin = {
            "email": data.email,
            "name": INVITED_NAME,
            "role": INVITED_ROLE,
            "status": "Inactive",
            "lastLogin": utc_now_iso(),
            "activities": [],
        }
        created = await self._backend.create(self.resource, new_admin)
        logger.info("Invited admin %s", data.email)
        return created

    async def update(self, admin_id: int | str, data: AdminUpdate) -> dict[str, Any]:
        current = await self.get(admin_id)
        merged = {**current, **data.model_dump(by_alias=True, mode="json")}
        updated = await self._backend.update(self.resource, admin_id, merged)
        logger.info("Updated admin %s", admin_id)
        return updated or merged

    async def delete(self, admin_id: int | str) -> None:
        await self._backend.delete(self.resource, admin_id)
        logger.info("Deleted admin %s", admin_id)
