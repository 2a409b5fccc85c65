from fastapi import APIRouter, Depends

from fixit_admin.core.response import DataResponse
from fixit_admin.schemas.dashboard import DashboardStats
from fixit_admin.services.backend_client import BackendClient, get_backend
from fixit_admin.services.dashboard import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=DataResponse[DashboardStats])
async def dashboard_stats(backend: BackendClient = Depends(get_backend)):
    return {"data": await DashboardService(backend).stats()}
