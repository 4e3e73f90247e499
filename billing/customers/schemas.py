"""Pydantic schemas for the customers module."""

from pydantic import BaseModel, ConfigDict


class CustomerField(BaseModel):
    """Minimal customer reference used by invoice forms."""

    id: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class CustomerTableRow(BaseModel):
    """A customer with invoice totals derived at query time (cents)."""

    id: str
    name: str
    email: str
    image_url: str
    total_invoices: int = 0
    total_pending: int = 0
    total_paid: int = 0

    model_config = ConfigDict(from_attributes=True)
