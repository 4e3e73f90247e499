"""Derived invoice totals computed in Python from fetched rows."""

from dataclasses import dataclass
from typing import Iterable

from billing.invoices.models import InvoiceStatus


@dataclass(frozen=True)
class InvoiceTotals:
    count: int = 0
    paid: int = 0
    pending: int = 0


def summarize_invoices(rows: Iterable) -> InvoiceTotals:
    """Count ``rows`` and sum their amounts per status.

    Each row needs ``amount`` and ``status`` attributes. Statuses other than
    paid and pending are counted but added to neither total.
    """
    count = paid = pending = 0
    for row in rows:
        count += 1
        if row.status == InvoiceStatus.PAID:
            paid += row.amount
        elif row.status == InvoiceStatus.PENDING:
            pending += row.amount
    return InvoiceTotals(count=count, paid=paid, pending=pending)
