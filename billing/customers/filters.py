"""Search predicate for the customer listing."""

from sqlalchemy import or_
from sqlalchemy.sql.elements import ColumnElement

from billing.customers.models import Customer


def customer_search_filter(query: str) -> ColumnElement:
    """Case-insensitive substring match on customer name or email."""
    return or_(
        Customer.name.icontains(query, autoescape=True),
        Customer.email.icontains(query, autoescape=True),
    )
