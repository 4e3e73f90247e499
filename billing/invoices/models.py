"""Database models for the invoices module."""

import uuid
from enum import Enum as PyEnum

from sqlalchemy import CheckConstraint, Column, Date, Enum, ForeignKey, Integer, String

from billing.core.database import Base


class InvoiceStatus(str, PyEnum):
    """Lifecycle state of an invoice."""

    PENDING = "pending"
    PAID = "paid"


class Invoice(Base):
    """An invoice owned by exactly one customer.

    ``amount`` is stored in minor currency units (cents).
    """

    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    customer_id = Column(String(36), ForeignKey("customers.id"), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    status = Column(
        Enum(
            InvoiceStatus,
            name="invoice_status",
            native_enum=False,
            length=16,
            values_callable=lambda statuses: [status.value for status in statuses],
        ),
        nullable=False,
    )
    date = Column(Date, nullable=False, index=True)

    __table_args__ = (CheckConstraint("amount >= 0", name="ck_invoices_amount_non_negative"),)

    def __repr__(self):
        return f"<Invoice(id={self.id!r}, amount={self.amount}, status={self.status})>"
