"""Dependencies shared by the v1 routers."""

from fastapi import Depends, Query

from fixit_admin.core.listing import ListQuery
from fixit_admin.core.pagination import PaginationParams


def list_query(
    search: str | None = Query(default=None, description="Case-insensitive search term"),
    tab: str | None = Query(default=None, description="Tab name; omitted means the first tab"),
    pagination: PaginationParams = Depends(),
) -> ListQuery:
    """`?search=&tab=&page=&limit=` shared by every list view."""
    return ListQuery(search=search, tab=tab, page=pagination.page, limit=pagination.limit)
