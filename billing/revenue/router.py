from typing import Annotated, List

from fastapi import APIRouter, Depends

from billing.core.dependencies import StoreDep, TimeoutDep
from billing.revenue.schemas import RevenuePoint
from billing.revenue.service import RevenueService

router = APIRouter(prefix="/revenue", tags=["Revenue"])


def get_revenue_service(store: StoreDep, timeout: TimeoutDep) -> RevenueService:
    return RevenueService(store, timeout=timeout)


@router.get("", response_model=List[RevenuePoint])
async def list_revenue(service: Annotated[RevenueService, Depends(get_revenue_service)]) -> List[RevenuePoint]:
    return await service.list_revenue()
