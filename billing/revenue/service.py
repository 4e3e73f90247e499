"""Service layer for monthly revenue figures."""

from typing import List

from billing.core.base_service import BaseService, store_operation
from billing.revenue.dao import RevenueDAO
from billing.revenue.schemas import RevenuePoint

CALENDAR_MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _calendar_position(point: RevenuePoint) -> int:
    # Unknown labels sort after December, in stored order
    try:
        return CALENDAR_MONTHS.index(point.month)
    except ValueError:
        return len(CALENDAR_MONTHS)


class RevenueService(BaseService):
    def __init__(self, store, timeout=None):
        super().__init__(store, timeout)
        self.revenue_dao = RevenueDAO()

    @store_operation("fetch revenue data")
    async def list_revenue(self) -> List[RevenuePoint]:
        """All revenue points in calendar order."""
        rows = await self.store.fetch_all(self.revenue_dao.revenue_points())
        points = [RevenuePoint.model_validate(row[0]) for row in rows]
        return sorted(points, key=_calendar_position)
