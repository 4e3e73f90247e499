"""Seed loader: idempotent bulk load of the reference data.

Batches run in a fixed order (users, customers, invoices, revenue) because
invoices reference customers. Each batch is its own transaction: a failure
stops the remaining batches but does not roll back those already written.
Callers must not run two seeds against the same store concurrently.
"""

import asyncio
import datetime
import logging
from typing import Any, Dict, List

from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from billing.core.base_service import BaseService, store_operation
from billing.core.exceptions import BillingError, InvalidInputError
from billing.customers.models import Customer
from billing.invoices.models import Invoice
from billing.revenue.models import Revenue
from billing.seed.placeholder_data import PLACEHOLDER_DATA, SeedData
from billing.users.models import User
from billing.users.security import DEFAULT_ROUNDS, hash_password

logger = logging.getLogger(__name__)


class SeedReport(BaseModel):
    """Rows inserted per batch; all zeros on a re-run."""

    users: int = 0
    customers: int = 0
    invoices: int = 0
    revenue: int = 0


class SeedService(BaseService):
    def __init__(self, store, timeout=None, data: SeedData = PLACEHOLDER_DATA, bcrypt_rounds: int = DEFAULT_ROUNDS):
        super().__init__(store, timeout)
        self.data = data
        self.bcrypt_rounds = bcrypt_rounds

    async def seed_all(self) -> SeedReport:
        """Run every batch in order and report how many rows each inserted.

        The first failing batch aborts the run and its error is re-raised.
        """
        report = SeedReport()
        for batch, seed in (
            ("users", self.seed_users),
            ("customers", self.seed_customers),
            ("invoices", self.seed_invoices),
            ("revenue", self.seed_revenue),
        ):
            try:
                inserted = await seed()
            except BillingError:
                logger.error("Database seeding aborted at %s; earlier batches stay committed", batch)
                raise
            setattr(report, batch, inserted)
            logger.info("Seeded %s: %d new rows", batch, inserted)
        return report

    @store_operation("seed users")
    async def seed_users(self) -> int:
        try:
            hashed = await asyncio.gather(
                *(run_in_threadpool(hash_password, user["password"], self.bcrypt_rounds) for user in self.data.users)
            )
        except ValueError as exc:
            raise InvalidInputError("Failed to seed users.") from exc
        rows = [
            {"id": user["id"], "name": user["name"], "email": user["email"], "password_hash": password_hash}
            for user, password_hash in zip(self.data.users, hashed)
        ]
        return await self.store.upsert(User, rows, conflict_key="id")

    @store_operation("seed customers")
    async def seed_customers(self) -> int:
        return await self.store.upsert(Customer, self.data.customers, conflict_key="id")

    @store_operation("seed invoices")
    async def seed_invoices(self) -> int:
        return await self.store.upsert(Invoice, self._invoice_rows(), conflict_key="id")

    @store_operation("seed revenue")
    async def seed_revenue(self) -> int:
        return await self.store.upsert(Revenue, self.data.revenue, conflict_key="month")

    def _invoice_rows(self) -> List[Dict[str, Any]]:
        rows = []
        for invoice in self.data.invoices:
            row = dict(invoice)
            if isinstance(row["date"], str):
                row["date"] = datetime.date.fromisoformat(row["date"])
            rows.append(row)
        return rows
