from fastapi import APIRouter, Depends, Query
from gemstore.database.supabase_client import get_supabase
from gemstore.modules.dashboard.schemas import DashboardStatsResponse
from gemstore.modules.dashboard.service import DashboardService
from gemstore.core.dependencies import require_admin
from supabase import Client
from typing import Dict

router = APIRouter(prefix="/admin", tags=["dashboard"])


def get_dashboard_service(supabase: Client = Depends(get_supabase)) -> DashboardService:
    return DashboardService(supabase)


@router.get("/dashboard-stats", response_model=DashboardStatsResponse)
async def get_dashboard_stats(
    mode: str = Query("dev", pattern="^(dev|live)$"),
    admin: Dict = Depends(require_admin),
    service: DashboardService = Depends(get_dashboard_service)
):
    """Admin dashboard figures for test (dev) or live orders"""
    return DashboardStatsResponse(stats=service.get_stats(mode))
