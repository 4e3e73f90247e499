"""Pydantic schemas for the revenue module."""

from pydantic import BaseModel, ConfigDict


class RevenuePoint(BaseModel):
    """Revenue for one calendar month, in minor currency units."""

    month: str
    revenue: int

    model_config = ConfigDict(from_attributes=True)
