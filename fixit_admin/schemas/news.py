"""News post schema."""

from fixit_admin.schemas.common import BackendRecord


class NewsItem(BackendRecord):
    # Strict: a post without these is malformed
    title: str
    posted_by: str
    date_time: str
    body: str
    image_url: str | None = None
