from fastapi import APIRouter, Depends

from marketmate.deps import get_dashboard_service
from marketmate.schemas.dashboard import DashboardStats
from marketmate.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStats)
async def dashboard_stats(service: DashboardService = Depends(get_dashboard_service)):
    """Product counts and sales totals for today and the current month."""
    return await service.get_stats()
