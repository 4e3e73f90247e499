"""Statement builders for invoice reads.

The filtered listing and its page count are both derived from
``filtered_table_rows`` so they can never disagree on which rows match.
"""

from sqlalchemy import String, case, cast, func, select
from sqlalchemy.sql import Select

from billing.core.base_dao import BaseDAO
from billing.customers.models import Customer
from billing.invoices.filters import invoice_search_filter
from billing.invoices.models import Invoice, InvoiceStatus


class InvoiceDAO(BaseDAO[Invoice]):
    def __init__(self):
        super().__init__(Invoice)

    def filtered_table_rows(self, query: str) -> Select:
        """Invoices joined to their customers, narrowed by ``query`` when non-empty.

        The join is outer so an invoice whose customer is missing still comes
        back (with null customer columns) and can be reported, not dropped.
        """
        stmt = select(
            Invoice.id,
            Invoice.amount,
            Invoice.date,
            Invoice.status,
            Customer.name,
            Customer.email,
            Customer.image_url,
        ).outerjoin_from(Invoice, Customer, Invoice.customer_id == Customer.id)
        if query:
            stmt = stmt.where(invoice_search_filter(query))
        return stmt

    def filtered_table_page(self, query: str, offset: int, limit: int) -> Select:
        """One page of ``filtered_table_rows``, most recent first."""
        return (
            self.filtered_table_rows(query)
            .order_by(Invoice.date.desc(), Invoice.id)
            .offset(offset)
            .limit(limit)
        )

    def latest(self, limit: int) -> Select:
        return (
            select(Invoice.id, Invoice.amount, Customer.name, Customer.image_url, Customer.email)
            .outerjoin_from(Invoice, Customer, Invoice.customer_id == Customer.id)
            .order_by(Invoice.date.desc(), Invoice.id)
            .limit(limit)
        )

    def form_by_id(self, invoice_id: str) -> Select:
        return select(Invoice.id, Invoice.customer_id, Invoice.amount, Invoice.status).where(
            Invoice.id == invoice_id
        )

    def with_amount(self, amount: int) -> Select:
        return (
            select(Invoice.id, Invoice.amount, Customer.name)
            .outerjoin_from(Invoice, Customer, Invoice.customer_id == Customer.id)
            .where(Invoice.amount == amount)
            .order_by(Invoice.date.desc(), Invoice.id)
        )

    def amounts_for_customer(self, customer_id: str) -> Select:
        # Status as stored text so unrecognised values still load and get counted
        return select(Invoice.amount, cast(Invoice.status, String).label("status")).where(
            Invoice.customer_id == customer_id
        )

    def status_totals(self) -> Select:
        """Paid and pending sums over every invoice; zero when there are none."""
        return select(
            func.coalesce(func.sum(case((Invoice.status == InvoiceStatus.PAID, Invoice.amount), else_=0)), 0).label(
                "paid"
            ),
            func.coalesce(
                func.sum(case((Invoice.status == InvoiceStatus.PENDING, Invoice.amount), else_=0)), 0
            ).label("pending"),
        )
