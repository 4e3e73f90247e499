# billing/core/exception_handlers.py
"""Map billing domain errors onto HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from billing.core.exceptions import (
    BillingError,
    IntegrityViolationError,
    InvalidInputError,
    NotFoundError,
    OperationCancelledError,
)

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    InvalidInputError: 422,
    NotFoundError: 404,
    IntegrityViolationError: 409,
    OperationCancelledError: 504,
}


def status_code_for(exc: BillingError) -> int:
    for error_type, status_code in _STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


async def billing_exception_handler(request: Request, exc: BillingError) -> JSONResponse:
    """Return the operation-scoped message; store details were already logged."""
    status_code = status_code_for(exc)
    logger.warning("%s %s -> %d: %s", request.method, request.url.path, status_code, exc.message)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BillingError, billing_exception_handler)
