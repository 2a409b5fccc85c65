"""Customer review schemas."""

from pydantic import Field

from fixit_admin.schemas.common import BackendRecord, CamelModel


class Review(BackendRecord):
    name: str = ""
    email: str | None = None
    rating: float | None = None
    comment: str | None = None
    response: str | None = None
    status: str | None = None
    date: str | None = None


class ReviewResponse(CamelModel):
    response: str = Field(min_length=1)


class ReviewSummary(CamelModel):
    total: int
    average_rating: float
    responded: int
