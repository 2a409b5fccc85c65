"""Content moderation: listing, detail and the approve/reject review."""

import logging
from typing import Any

from fixit_admin.core.exceptions import ConflictError, ValidationError
from fixit_admin.core.listing import ListView, everything, status_in
from fixit_admin.schemas.content import ContentReview
from fixit_admin.services.collection import CollectionService

logger = logging.getLogger(__name__)


def display_status(status: str | None) -> str:
    """Label shown in the status badge; "rejected" reads as "Disapproved"."""
    if not status:
        return ""
    if status == "rejected":
        return "Disapproved"
    return status[:1].upper() + status[1:]


class ContentService(CollectionService):
    resource = "content"
    view = ListView(
        search_fields=("name", "contentText"),
        tabs={
            "all": everything,
            "pending": status_in("pending"),
            "approved": status_in("approved"),
            "disapproved": status_in("rejected"),
        },
    )

    def _decorate(self, record: dict[str, Any]) -> dict[str, Any]:
        return {**record, "displayStatus": display_status(record.get("status"))}

    async def review(self, content_id: int | str, review: ContentReview) -> dict[str, Any]:
        item = await self.get(content_id)
        if item.get("status") != "pending":
            raise ConflictError(
                f"Content '{content_id}' has already been reviewed ({item.get('status')})"
            )

        if review.decision == "approve":
            changes = {"status": "approved"}
        else:
            reason = (review.reason or "").strip()
            if not reason:
                raise ValidationError(
                    "A reason is required to disapprove content",
                    fields={"reason": "Reason is required"},
                )
            changes = {"status": "rejected", "reason": reason}

        updated = await self._backend.patch(self.resource, content_id, changes)
        logger.info("Content %s %sd", content_id, review.decision)
        return self._decorate(updated or {**item, **changes})
