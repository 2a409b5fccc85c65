"""Customer reviews: listing, admin responses and removal."""

import logging
from typing import Any

from fixit_admin.core.exceptions import ValidationError
from fixit_admin.core.listing import ListView
from fixit_admin.schemas.review import ReviewResponse, ReviewSummary
from fixit_admin.services.collection import CollectionService

logger = logging.getLogger(__name__)


class ReviewService(CollectionService):
    resource = "reviews"
    view = ListView(
        search_fields=("name", "email", "comment"),
        filter_fields=("status",),
    )

    async def summary(self) -> ReviewSummary:
        reviews = await self._backend.list(self.resource)
        ratings = [float(r["rating"]) for r in reviews if isinstance(r.get("rating"), (int, float))]
        average = round(sum(ratings) / len(ratings), 1) if ratings else 0.0
        return ReviewSummary(
            total=len(reviews),
            average_rating=average,
            responded=sum(1 for r in reviews if r.get("response")),
        )

    async def respond(self, review_id: int | str, data: ReviewResponse) -> dict[str, Any]:
        text = data.response.strip()
        if not text:
            raise ValidationError("Response cannot be blank", fields={"response": "Response is required"})
        current = await self.get(review_id)
        changes = {"response": text}
        updated = await self._backend.patch(self.resource, review_id, changes)
        logger.info("Responded to review %s", review_id)
        return updated or {**current, **changes}

    async def delete(self, review_id: int | str) -> None:
        await self._backend.delete(self.resource, review_id)
        logger.info("Deleted review %s", review_id)
