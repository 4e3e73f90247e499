# billing/core/store.py
"""Async store client over a SQLAlchemy engine.

Each call opens its own short-lived session and runs on Starlette's
threadpool, so independent calls can be awaited concurrently with
``asyncio.gather``. Errors from SQLAlchemy are raised unchanged; the service
layer translates them into domain errors.
"""

from typing import Any, Dict, List, Optional, Sequence, Type

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.engine import Engine, Row
from sqlalchemy.sql import Select
from starlette.concurrency import run_in_threadpool

from billing.core.database import Base, build_session_factory

_DIALECT_INSERTS = {
    "sqlite": sqlite.insert,
    "postgresql": postgresql.insert,
}


class StoreClient:
    """Executes select, count and upsert statements against the relational store."""

    def __init__(self, engine: Engine, supports_grouping: bool = True):
        self.engine = engine
        self.supports_grouping = supports_grouping
        self._session_factory = build_session_factory(engine)

    @property
    def dialect_name(self) -> str:
        return self.engine.dialect.name

    # ===== READS =====

    async def fetch_all(self, stmt: Select) -> List[Row]:
        """Run ``stmt`` and return every row."""
        return await run_in_threadpool(self._fetch_all, stmt)

    async def fetch_one(self, stmt: Select) -> Optional[Row]:
        """Run ``stmt`` and return the first row, or None."""
        return await run_in_threadpool(self._fetch_one, stmt)

    async def scalar(self, stmt: Select) -> Any:
        return await run_in_threadpool(self._scalar, stmt)

    async def count(self, stmt: Select) -> int:
        """Count the rows ``stmt`` would return without fetching them."""
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        return int(await self.scalar(count_stmt) or 0)

    async def grouped_totals(self, stmt: Select) -> List[Row]:
        """Run a GROUP BY aggregation in the store."""
        if not self.supports_grouping:
            raise NotImplementedError("This store does not push down grouped aggregation")
        return await self.fetch_all(stmt)

    def _fetch_all(self, stmt: Select) -> List[Row]:
        with self._session_factory() as session:
            return list(session.execute(stmt).all())

    def _fetch_one(self, stmt: Select) -> Optional[Row]:
        with self._session_factory() as session:
            return session.execute(stmt).first()

    def _scalar(self, stmt: Select) -> Any:
        with self._session_factory() as session:
            return session.execute(stmt).scalar()

    # ===== WRITES =====

    async def upsert(
        self,
        model: Type[Base],
        rows: Sequence[Dict[str, Any]],
        conflict_key: str,
        skip_on_conflict: bool = True,
    ) -> int:
        """Insert ``rows`` keyed by ``conflict_key`` and return how many were written.

        With ``skip_on_conflict`` rows whose key already exists are left
        untouched; otherwise their remaining columns are overwritten.
        """
        if not rows:
            return 0
        return await run_in_threadpool(self._upsert, model, list(rows), conflict_key, skip_on_conflict)

    def _upsert(
        self,
        model: Type[Base],
        rows: List[Dict[str, Any]],
        conflict_key: str,
        skip_on_conflict: bool,
    ) -> int:
        try:
            dialect_insert = _DIALECT_INSERTS[self.dialect_name]
        except KeyError as exc:
            raise NotImplementedError(f"Upsert is not supported on '{self.dialect_name}'") from exc

        stmt = dialect_insert(model.__table__).values(rows)
        if skip_on_conflict:
            stmt = stmt.on_conflict_do_nothing(index_elements=[conflict_key])
        else:
            stmt = stmt.on_conflict_do_update(
                index_elements=[conflict_key],
                set_={
                    column.name: stmt.excluded[column.name]
                    for column in model.__table__.columns
                    if column.name != conflict_key
                },
            )

        with self._session_factory.begin() as session:
            result = session.execute(stmt)
        return max(result.rowcount, 0)
