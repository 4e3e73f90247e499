"""Database models for the customers module."""

import uuid

from sqlalchemy import Column, String

from billing.core.database import Base


class Customer(Base):
    """A billed customer; invoices reference it by ``id``."""

    __tablename__ = "customers"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False, index=True)
    email = Column(String(255), nullable=False)
    image_url = Column(String(255), nullable=False)

    def __repr__(self):
        return f"<Customer(id={self.id!r}, name={self.name!r})>"
