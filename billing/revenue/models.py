"""Database models for the revenue module."""

from sqlalchemy import Column, Integer, String

from billing.core.database import Base


class Revenue(Base):
    """Revenue booked in a calendar month, keyed by the month label ("Jan")."""

    __tablename__ = "revenue"

    month = Column(String(16), primary_key=True)
    revenue = Column(Integer, nullable=False)
