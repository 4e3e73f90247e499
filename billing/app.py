"""FastAPI application factory for the billing API."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from billing.core.config import get_settings
from billing.core.exception_handlers import register_exception_handlers
from billing.core.logging import configure_logging
from billing.core.middleware import LoggingMiddleware
from billing.core.router import register_routes


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Billing API",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    app.add_middleware(LoggingMiddleware, application_id=settings.application_id)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # In production, replace with specific origins
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    register_routes(app)
    return app
