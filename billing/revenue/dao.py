"""Statement builders for the revenue table."""

from sqlalchemy.sql import Select

from billing.core.base_dao import BaseDAO
from billing.revenue.models import Revenue


class RevenueDAO(BaseDAO[Revenue]):
    def __init__(self):
        super().__init__(Revenue)

    def revenue_points(self) -> Select:
        return self.select_all().order_by(Revenue.month)
