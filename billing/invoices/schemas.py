"""Pydantic schemas for the invoices module."""

import datetime

from pydantic import BaseModel, ConfigDict

from billing.invoices.models import InvoiceStatus


class InvoiceTableRow(BaseModel):
    """One row of the filtered invoice listing, joined to its customer."""

    id: str
    amount: int
    date: datetime.date
    status: InvoiceStatus
    name: str
    email: str
    image_url: str

    model_config = ConfigDict(from_attributes=True)


class LatestInvoice(BaseModel):
    id: str
    amount: int
    name: str
    image_url: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class InvoiceForm(BaseModel):
    """Editable fields of a single invoice."""

    id: str
    customer_id: str
    amount: int
    status: InvoiceStatus

    model_config = ConfigDict(from_attributes=True)


class InvoiceAmountMatch(BaseModel):
    id: str
    amount: int
    name: str

    model_config = ConfigDict(from_attributes=True)
