"""Read-only list/detail service over one backend collection.

Subclasses declare which backend resource they read and the
:class:`~fixit_admin.core.listing.ListView` that turns the collection into
one page of rows.
"""

from typing import Any

from fixit_admin.core.listing import ListQuery, ListResult, ListView
from fixit_admin.services.backend_client import BackendClient


class CollectionService:
    resource: str
    view: ListView

    def __init__(self, backend: BackendClient):
        self._backend = backend

    def _decorate(self, record: dict[str, Any]) -> dict[str, Any]:
        """Hook for derived display fields; identity by default."""
        return record

    async def list(self, query: ListQuery) -> ListResult:
        records = await self._backend.list(self.resource)
        result = self.view.apply(records, query)
        result.items = [self._decorate(r) for r in result.items]
        return result

    async def get(self, entity_id: int | str) -> dict[str, Any]:
        return self._decorate(await self._backend.get(self.resource, entity_id))
