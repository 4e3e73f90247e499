"""
Test configuration and shared fixtures for the billing test suite.
Provides a throwaway SQLite store per test, sample rows and an API client.
"""

import datetime
from typing import List

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from billing.app import create_app
from billing.core.database import build_engine, create_all_tables
from billing.core.dependencies import get_store, get_store_timeout
from billing.core.store import StoreClient
from billing.customers.models import Customer
from billing.invoices.models import Invoice, InvoiceStatus
from billing.seed.service import SeedService

# Lowest cost bcrypt accepts; keeps seeding fast under test
TEST_BCRYPT_ROUNDS = 4


# ===== DATABASE SETUP =====


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite engine so concurrent store calls get their own connections"""
    engine = build_engine(f"sqlite:///{tmp_path / 'billing.db'}")
    create_all_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def store(engine) -> StoreClient:
    return StoreClient(engine)


@pytest.fixture
def db_session(engine):
    with Session(engine) as session:
        yield session


# ===== SAMPLE DATA FIXTURES =====


@pytest.fixture
def sample_customers(db_session) -> List[Customer]:
    """Three customers; Carol has no invoices"""
    customers = [
        Customer(id="cust-alice", name="Alice Smith", email="alice@example.com", image_url="/customers/alice.png"),
        Customer(id="cust-bob", name="Bob Jones", email="bob@jones.io", image_url="/customers/bob.png"),
        Customer(id="cust-carol", name="Carol White", email="carol@white.dev", image_url="/customers/carol.png"),
    ]
    db_session.add_all(customers)
    db_session.commit()
    return customers


@pytest.fixture
def sample_invoices(db_session, sample_customers) -> List[Invoice]:
    """Fourteen invoices: three for Alice (100 paid, 50 pending, 25 paid), eleven for Bob"""
    invoices = [
        Invoice(id="inv-a1", customer_id="cust-alice", amount=100, status=InvoiceStatus.PAID,
                date=datetime.date(2024, 1, 10)),
        Invoice(id="inv-a2", customer_id="cust-alice", amount=50, status=InvoiceStatus.PENDING,
                date=datetime.date(2024, 2, 11)),
        Invoice(id="inv-a3", customer_id="cust-alice", amount=25, status=InvoiceStatus.PAID,
                date=datetime.date(2024, 3, 12)),
    ]
    for n in range(1, 12):
        invoices.append(
            Invoice(
                id=f"inv-b{n:02d}",
                customer_id="cust-bob",
                amount=1000 + n,
                status=InvoiceStatus.PAID if n % 2 else InvoiceStatus.PENDING,
                # Two invoices share each date so ordering ties are exercised
                date=datetime.date(2023, 5, (n + 1) // 2),
            )
        )
    db_session.add_all(invoices)
    db_session.commit()
    return invoices


@pytest.fixture
async def seeded_store(store) -> StoreClient:
    """Store loaded with the placeholder reference data"""
    await SeedService(store, bcrypt_rounds=TEST_BCRYPT_ROUNDS).seed_all()
    return store


# ===== API CLIENT =====


@pytest.fixture
def client(seeded_store):
    """FastAPI test client bound to the seeded store"""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: seeded_store
    app.dependency_overrides[get_store_timeout] = lambda: None

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
