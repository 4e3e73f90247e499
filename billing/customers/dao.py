"""Statement builders for customer reads."""

from sqlalchemy import case, func, select
from sqlalchemy.sql import Select

from billing.core.base_dao import BaseDAO
from billing.customers.filters import customer_search_filter
from billing.customers.models import Customer
from billing.invoices.models import Invoice, InvoiceStatus


class CustomerDAO(BaseDAO[Customer]):
    def __init__(self):
        super().__init__(Customer)

    def filtered(self, query: str) -> Select:
        """Customers whose name or email contains ``query``, by name."""
        stmt = select(Customer.id, Customer.name, Customer.email, Customer.image_url)
        if query:
            stmt = stmt.where(customer_search_filter(query))
        return stmt.order_by(Customer.name, Customer.id)

    def filtered_with_totals(self, query: str) -> Select:
        """Same rows as ``filtered`` with invoice totals aggregated in one GROUP BY."""
        stmt = (
            select(
                Customer.id,
                Customer.name,
                Customer.email,
                Customer.image_url,
                func.count(Invoice.id).label("total_invoices"),
                func.coalesce(
                    func.sum(case((Invoice.status == InvoiceStatus.PENDING, Invoice.amount), else_=0)), 0
                ).label("total_pending"),
                func.coalesce(
                    func.sum(case((Invoice.status == InvoiceStatus.PAID, Invoice.amount), else_=0)), 0
                ).label("total_paid"),
            )
            .outerjoin_from(Customer, Invoice, Invoice.customer_id == Customer.id)
            .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
        )
        if query:
            stmt = stmt.where(customer_search_filter(query))
        return stmt.order_by(Customer.name, Customer.id)

    def fields(self) -> Select:
        return select(Customer.id, Customer.name).order_by(Customer.name, Customer.id)
