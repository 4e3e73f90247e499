"""Service layer for invoice listings and lookups."""

import logging
import math
from typing import List

from billing.core.base_service import BaseService, store_operation
from billing.core.exceptions import IntegrityViolationError, InvalidInputError, NotFoundError
from billing.invoices.dao import InvoiceDAO
from billing.invoices.schemas import InvoiceAmountMatch, InvoiceForm, InvoiceTableRow, LatestInvoice

logger = logging.getLogger(__name__)

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5
# Largest OFFSET a 64-bit SQL integer can hold
MAX_OFFSET = 2**63 - 1


def _require_customer(row, action: str) -> None:
    if row.name is None:
        logger.error("Invoice %s references a missing customer", row.id)
        raise IntegrityViolationError(f"Failed to {action}.")


class InvoiceService(BaseService):
    """Filtered, paginated invoice reads joined to their customers."""

    def __init__(self, store, timeout=None):
        super().__init__(store, timeout)
        self.invoice_dao = InvoiceDAO()

    @store_operation("fetch invoices")
    async def list_invoices(self, query: str, page: int) -> List[InvoiceTableRow]:
        """Return page ``page`` (1-indexed) of invoices matching ``query``.

        Rows are ordered by date, newest first, ``ITEMS_PER_PAGE`` per page.
        A page past the last one is empty.
        """
        if isinstance(page, bool) or not isinstance(page, int) or page < 1:
            raise InvalidInputError(f"Page must be a positive integer, got {page!r}.")

        offset = (page - 1) * ITEMS_PER_PAGE
        if offset > MAX_OFFSET:
            return []
        stmt = self.invoice_dao.filtered_table_page(query or "", offset, ITEMS_PER_PAGE)
        rows = await self.store.fetch_all(stmt)

        invoices = []
        for row in rows:
            _require_customer(row, "fetch invoices")
            invoices.append(InvoiceTableRow.model_validate(row))
        return invoices

    @store_operation("fetch total number of invoices")
    async def count_invoice_pages(self, query: str) -> int:
        """Number of pages ``list_invoices`` needs for ``query``; 0 when nothing matches."""
        total = await self.store.count(self.invoice_dao.filtered_table_rows(query or ""))
        return math.ceil(total / ITEMS_PER_PAGE)

    @store_operation("fetch the latest invoices")
    async def list_latest_invoices(self, limit: int = LATEST_INVOICES_LIMIT) -> List[LatestInvoice]:
        rows = await self.store.fetch_all(self.invoice_dao.latest(limit))
        invoices = []
        for row in rows:
            _require_customer(row, "fetch the latest invoices")
            invoices.append(LatestInvoice.model_validate(row))
        return invoices

    @store_operation("fetch invoice")
    async def get_invoice(self, invoice_id: str) -> InvoiceForm:
        row = await self.store.fetch_one(self.invoice_dao.form_by_id(invoice_id))
        if row is None:
            raise NotFoundError(f"Invoice {invoice_id} not found.")
        return InvoiceForm.model_validate(row)

    @store_operation("fetch invoices by amount")
    async def list_invoices_with_amount(self, amount: int) -> List[InvoiceAmountMatch]:
        """Invoices of exactly ``amount`` cents with their customer's name."""
        rows = await self.store.fetch_all(self.invoice_dao.with_amount(amount))
        matches = []
        for row in rows:
            _require_customer(row, "fetch invoices by amount")
            matches.append(InvoiceAmountMatch.model_validate(row))
        return matches
