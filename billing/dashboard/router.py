from typing import Annotated

from fastapi import APIRouter, Depends

from billing.core.dependencies import StoreDep, TimeoutDep
from billing.dashboard.schemas import CardSummary
from billing.dashboard.service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


def get_dashboard_service(store: StoreDep, timeout: TimeoutDep) -> DashboardService:
    return DashboardService(store, timeout=timeout)


@router.get("/cards", response_model=CardSummary)
async def card_summary(service: Annotated[DashboardService, Depends(get_dashboard_service)]) -> CardSummary:
    return await service.card_summary()
