"""Service layer for customer listings."""

import asyncio
import logging
from typing import List

from billing.core.base_service import BaseService, store_operation
from billing.customers.dao import CustomerDAO
from billing.customers.schemas import CustomerField, CustomerTableRow
from billing.invoices.aggregates import summarize_invoices
from billing.invoices.dao import InvoiceDAO

logger = logging.getLogger(__name__)


class CustomerService(BaseService):
    """Customer listings with per-customer invoice totals."""

    def __init__(self, store, timeout=None):
        super().__init__(store, timeout)
        self.customer_dao = CustomerDAO()
        self.invoice_dao = InvoiceDAO()

    @store_operation("fetch customer table")
    async def list_customers(self, query: str) -> List[CustomerTableRow]:
        """Customers matching ``query`` by name or email, ordered by name.

        Totals come from a single grouped query when the store can aggregate,
        otherwise from one sub-query per customer issued concurrently.
        """
        if self.store.supports_grouping:
            rows = await self.store.grouped_totals(self.customer_dao.filtered_with_totals(query or ""))
            return [CustomerTableRow.model_validate(row) for row in rows]

        customers = await self.store.fetch_all(self.customer_dao.filtered(query or ""))
        logger.debug("Aggregating invoices for %d customers one by one", len(customers))
        invoice_sets = await asyncio.gather(
            *(self.store.fetch_all(self.invoice_dao.amounts_for_customer(customer.id)) for customer in customers)
        )

        table = []
        for customer, invoices in zip(customers, invoice_sets):
            totals = summarize_invoices(invoices)
            table.append(
                CustomerTableRow(
                    id=customer.id,
                    name=customer.name,
                    email=customer.email,
                    image_url=customer.image_url,
                    total_invoices=totals.count,
                    total_pending=totals.pending,
                    total_paid=totals.paid,
                )
            )
        return table

    @store_operation("fetch all customers")
    async def list_customer_fields(self) -> List[CustomerField]:
        rows = await self.store.fetch_all(self.customer_dao.fields())
        return [CustomerField.model_validate(row) for row in rows]
