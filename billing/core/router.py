# billing/core/router.py
"""Register every billing router on the FastAPI application."""

from fastapi import FastAPI

from billing.customers.router import router as customer_router
from billing.dashboard.router import router as dashboard_router
from billing.invoices.router import router as invoice_router
from billing.revenue.router import router as revenue_router
from billing.seed.router import router as seed_router


def register_routes(app: FastAPI) -> None:
    app.include_router(invoice_router, prefix="/api")
    app.include_router(customer_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")
    app.include_router(revenue_router, prefix="/api")
    app.include_router(seed_router, prefix="/api")
