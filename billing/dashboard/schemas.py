"""Pydantic schemas for the dashboard module."""

from pydantic import BaseModel


class CardSummary(BaseModel):
    """System-wide counts and invoice totals (cents)."""

    number_of_customers: int
    number_of_invoices: int
    total_paid_invoices: int
    total_pending_invoices: int
