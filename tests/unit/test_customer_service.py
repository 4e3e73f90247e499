"""
Unit tests for the customer table and its per-customer invoice totals.
"""

from unittest.mock import AsyncMock, Mock

import pytest
from sqlalchemy import text
from sqlalchemy.exc import OperationalError

from billing.core.exceptions import StoreUnavailableError
from billing.core.store import StoreClient
from billing.customers.models import Customer
from billing.customers.service import CustomerService


def _as_tuples(rows):
    return [(row.name, row.total_invoices, row.total_pending, row.total_paid) for row in rows]


class TestCustomerTable:
    """Customer listing against a real SQLite store"""

    async def test_totals_per_customer(self, store, sample_invoices):
        rows = await CustomerService(store).list_customers("")
        assert _as_tuples(rows) == [
            ("Alice Smith", 3, 50, 125),
            ("Bob Jones", 11, 5030, 6036),
            ("Carol White", 0, 0, 0),
        ]

    async def test_customer_without_invoices_reports_zeros(self, store, sample_invoices):
        rows = await CustomerService(store).list_customers("carol")
        assert len(rows) == 1
        assert rows[0].id == "cust-carol"
        assert rows[0].image_url == "/customers/carol.png"
        assert (rows[0].total_invoices, rows[0].total_pending, rows[0].total_paid) == (0, 0, 0)

    async def test_query_matches_email(self, store, sample_invoices):
        rows = await CustomerService(store).list_customers("jones.io")
        assert [row.id for row in rows] == ["cust-bob"]

    async def test_search_is_case_insensitive(self, store, sample_invoices):
        service = CustomerService(store)
        assert _as_tuples(await service.list_customers("ALICE")) == _as_tuples(await service.list_customers("alice"))

    async def test_wildcards_are_literal(self, store, sample_invoices):
        assert await CustomerService(store).list_customers("%") == []

    @pytest.mark.parametrize("query", ["", "alice", "o", "white", "nomatch"])
    async def test_grouped_and_per_customer_paths_agree(self, engine, store, sample_invoices, query):
        """Pushing the aggregation into the store or summing in Python gives the same table"""
        grouped = await CustomerService(store).list_customers(query)
        fallback = await CustomerService(StoreClient(engine, supports_grouping=False)).list_customers(query)
        assert grouped == fallback

    async def test_search_folds_non_ascii_case(self, store, db_session, sample_invoices):
        db_session.add(Customer(id="cust-elodie", name="Élodie Durand", email="elodie@durand.fr", image_url="/e.png"))
        db_session.commit()
        service = CustomerService(store)

        upper = await service.list_customers("ÉLODIE")
        lower = await service.list_customers("élodie")

        assert [row.id for row in upper] == [row.id for row in lower] == ["cust-elodie"]

    async def test_unrecognised_status_counted_on_both_paths(self, engine, store, db_session, sample_invoices):
        """An invoice in neither state adds to the count but to neither total"""
        db_session.execute(
            text(
                "INSERT INTO invoices (id, customer_id, amount, status, date) "
                "VALUES ('inv-c1', 'cust-carol', 70, 'void', '2024-04-01')"
            )
        )
        db_session.commit()

        grouped = await CustomerService(store).list_customers("carol")
        fallback = await CustomerService(StoreClient(engine, supports_grouping=False)).list_customers("carol")

        assert grouped == fallback
        assert _as_tuples(grouped) == [("Carol White", 1, 0, 0)]

    async def test_customer_fields(self, store, sample_customers):
        fields = await CustomerService(store).list_customer_fields()
        assert [(field.id, field.name) for field in fields] == [
            ("cust-alice", "Alice Smith"),
            ("cust-bob", "Bob Jones"),
            ("cust-carol", "Carol White"),
        ]


class TestCustomerServiceErrors:
    async def test_store_failure(self):
        store = Mock()
        store.supports_grouping = True
        store.grouped_totals = AsyncMock(side_effect=OperationalError("SELECT ...", {}, Exception("gone")))

        with pytest.raises(StoreUnavailableError, match="Failed to fetch customer table."):
            await CustomerService(store).list_customers("")
