"""System-wide aggregates shown on the dashboard cards."""

import asyncio

from billing.core.base_service import BaseService, store_operation
from billing.customers.dao import CustomerDAO
from billing.dashboard.schemas import CardSummary
from billing.invoices.dao import InvoiceDAO


class DashboardService(BaseService):
    def __init__(self, store, timeout=None):
        super().__init__(store, timeout)
        self.customer_dao = CustomerDAO()
        self.invoice_dao = InvoiceDAO()

    @store_operation("fetch card data")
    async def card_summary(self) -> CardSummary:
        """Customer and invoice counts plus paid/pending totals.

        The three store queries run concurrently; the summary is built only
        once all of them have returned.
        """
        customer_count, invoice_count, totals = await asyncio.gather(
            self.store.scalar(self.customer_dao.count_all()),
            self.store.scalar(self.invoice_dao.count_all()),
            self.store.fetch_one(self.invoice_dao.status_totals()),
        )
        return CardSummary(
            number_of_customers=customer_count or 0,
            number_of_invoices=invoice_count or 0,
            total_paid_invoices=totals.paid if totals is not None else 0,
            total_pending_invoices=totals.pending if totals is not None else 0,
        )
