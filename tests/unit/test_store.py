"""
Unit tests for the store client.
"""

import pytest
from sqlalchemy import select

from billing.core.store import StoreClient
from billing.revenue.models import Revenue


class TestUpsert:
    async def test_empty_batch_writes_nothing(self, store):
        assert await store.upsert(Revenue, [], conflict_key="month") == 0

    async def test_skip_on_conflict_counts_only_new_rows(self, store):
        await store.upsert(Revenue, [{"month": "Jan", "revenue": 10}], conflict_key="month")

        inserted = await store.upsert(
            Revenue,
            [{"month": "Jan", "revenue": 99}, {"month": "Feb", "revenue": 20}],
            conflict_key="month",
        )

        assert inserted == 1
        rows = await store.fetch_all(select(Revenue.month, Revenue.revenue).order_by(Revenue.month))
        assert [(row.month, row.revenue) for row in rows] == [("Feb", 20), ("Jan", 10)]

    async def test_overwrite_on_conflict(self, store):
        await store.upsert(Revenue, [{"month": "Jan", "revenue": 10}], conflict_key="month")

        await store.upsert(Revenue, [{"month": "Jan", "revenue": 99}], conflict_key="month", skip_on_conflict=False)

        assert await store.scalar(select(Revenue.revenue).where(Revenue.month == "Jan")) == 99


class TestReads:
    async def test_count_ignores_ordering_and_paging_columns(self, store):
        await store.upsert(Revenue, [{"month": m, "revenue": 1} for m in ("Jan", "Feb", "Mar")], conflict_key="month")
        assert await store.count(select(Revenue.month).order_by(Revenue.month)) == 3

    async def test_fetch_one_returns_none_when_empty(self, store):
        assert await store.fetch_one(select(Revenue.month)) is None

    async def test_grouped_totals_unsupported(self, engine):
        store = StoreClient(engine, supports_grouping=False)
        with pytest.raises(NotImplementedError):
            await store.grouped_totals(select(Revenue.month))

    def test_dialect_name(self, store):
        assert store.dialect_name == "sqlite"
