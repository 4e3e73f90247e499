"""Database models for the users module."""

import uuid

from sqlalchemy import Column, String

from billing.core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    # bcrypt hash; the plaintext password is never stored
    password_hash = Column(String(255), nullable=False)
