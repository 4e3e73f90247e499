# billing/core/base_dao.py
"""Generic base DAO: builds statements for a model, the store executes them."""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy import and_, func, select
from sqlalchemy.sql import Select

from billing.core.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseDAO(Generic[ModelType]):
    """Statement builders shared by every billing DAO."""

    def __init__(self, model: Type[ModelType]):
        self.model = model

    def select_all(self, **filters: Any) -> Select:
        """Select all records with optional equality filtering."""
        return self._apply_filters(select(self.model), filters)

    def count_all(self, **filters: Any) -> Select:
        """Count-only statement; no row bodies are fetched."""
        primary_key = self.model.__mapper__.primary_key[0]
        return self._apply_filters(select(func.count(primary_key)), filters)

    def _apply_filters(self, query: Select, filters: dict) -> Select:
        conditions = []
        for key, value in filters.items():
            if not hasattr(self.model, key):
                raise AttributeError(f"{self.model.__name__} has no field '{key}'")
            if value is not None:
                conditions.append(getattr(self.model, key) == value)
        if conditions:
            query = query.where(and_(*conditions))
        return query
