# billing/core/base_service.py
"""Shared plumbing for the billing services: the store error boundary."""

import asyncio
import functools
import logging
from typing import Any, Awaitable, Callable, Optional, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from billing.core.exceptions import (
    BillingError,
    IntegrityViolationError,
    OperationCancelledError,
    StoreUnavailableError,
)
from billing.core.store import StoreClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


def store_operation(action: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Wrap a public service coroutine so store failures surface as domain errors.

    ``action`` names the operation ("fetch invoices"); callers see
    "Failed to fetch invoices." while the real cause is logged here and kept
    as ``__cause__``.
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(self: "BaseService", *args: Any, **kwargs: Any) -> T:
            message = f"Failed to {action}."
            try:
                return await self._run(func(self, *args, **kwargs))
            except BillingError:
                raise
            except asyncio.TimeoutError as exc:
                logger.warning("Timed out after %ss trying to %s", self.timeout, action)
                raise OperationCancelledError(message) from exc
            except asyncio.CancelledError:
                logger.info("Caller cancelled while trying to %s", action)
                raise
            except IntegrityError as exc:
                logger.exception("Integrity violation while trying to %s", action)
                raise IntegrityViolationError(message) from exc
            except SQLAlchemyError as exc:
                logger.exception("Database error while trying to %s", action)
                raise StoreUnavailableError(message) from exc
            except NotImplementedError as exc:
                logger.exception("Store cannot %s", action)
                raise StoreUnavailableError(message) from exc

        return wrapper

    return decorator


class BaseService:
    """Base class for services that talk to the store."""

    def __init__(self, store: StoreClient, timeout: Optional[float] = None):
        self.store = store
        self.timeout = timeout

    async def _run(self, coro: Awaitable[T]) -> T:
        if self.timeout is None:
            return await coro
        return await asyncio.wait_for(coro, timeout=self.timeout)
