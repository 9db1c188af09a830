"""Dashboard endpoint."""

from fastapi import APIRouter, Depends

from src.api.dependencies import get_dashboard_use_case
from src.application.use_cases.get_dashboard import GetDashboardUseCase
from src.core.entities.report import DashboardSummary

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSummary)
async def get_dashboard(
    use_case: GetDashboardUseCase = Depends(get_dashboard_use_case),
) -> DashboardSummary:
    return await use_case.execute()
