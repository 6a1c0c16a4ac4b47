from fastapi import APIRouter, Depends
from app.api.deps import get_storage
from app.core.storage import MemStorage
from app.schemas import DashboardStats
from app.services.analytics_service import get_dashboard_stats

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("/dashboard", response_model=DashboardStats)
async def get_dashboard(storage: MemStorage = Depends(get_storage)):
    """Headcount, today's clock-ins, average hours and weekly overtime."""
    return get_dashboard_stats(storage)
