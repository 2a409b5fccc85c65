"""Content moderation schemas."""

from typing import Literal

from fixit_admin.schemas.common import BackendRecord, CamelModel


class ContentItem(BackendRecord):
    name: str = ""
    date_posted: str | None = None
    status: str = "pending"  # approved | pending | rejected
    content_text: str | None = None
    image_url: str | None = None
    reason: str | None = None
    display_status: str | None = None


class ContentReview(CamelModel):
    decision: Literal["approve", "reject"]
    reason: str | None = None
