"""Search predicate shared by the invoice listing and its page count."""

from sqlalchemy import String, cast, or_
from sqlalchemy.sql.elements import ColumnElement

from billing.customers.models import Customer
from billing.invoices.models import Invoice


def invoice_search_filter(query: str) -> ColumnElement:
    """Match invoices whose customer or own fields contain ``query``.

    Case-insensitive literal substring match over the customer's name and
    email and the invoice's amount, date and status rendered as text.
    """
    return or_(
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
        cast(Invoice.amount, String).icontains(query, autoescape=True),
        cast(Invoice.date, String).icontains(query, autoescape=True),
        cast(Invoice.status, String).icontains(query, autoescape=True),
    )
