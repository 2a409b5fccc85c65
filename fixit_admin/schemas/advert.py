"""Advertisement banner schemas."""

from typing import Literal

from fixit_admin.schemas.common import BackendRecord, CamelModel


class Advert(BackendRecord):
    date_time: str | None = None
    advertiser: str = ""
    category: str | None = None
    amount_paid: float | None = None
    status: str | None = None  # Pending | Approved | Rejected
    image_url: str | None = None
    content: str | None = None


class AdvertReview(CamelModel):
    status: Literal["Approved", "Rejected"]
