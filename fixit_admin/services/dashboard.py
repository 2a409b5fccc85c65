from fixit_admin.core.exceptions import BackendUnavailableError
from fixit_admin.schemas.dashboard import DashboardStats
from fixit_admin.services.backend_client import BackendClient


class DashboardService:
    def __init__(self, backend: BackendClient):
        self._backend = backend

    async def stats(self) -> DashboardStats:
        data = await self._backend.get_document("dashboardStats")
        if not isinstance(data, dict):
            raise BackendUnavailableError("Backend returned malformed dashboard stats")
        return DashboardStats.from_backend(data)
