# billing/core/dependencies.py
"""FastAPI dependencies shared by the billing routers."""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends

from billing.core.config import get_settings
from billing.core.database import engine
from billing.core.store import StoreClient


@lru_cache
def get_store() -> StoreClient:
    """Store client on the configured database engine."""
    return StoreClient(engine)


def get_store_timeout() -> Optional[float]:
    return get_settings().store_timeout_seconds


StoreDep = Annotated[StoreClient, Depends(get_store)]
TimeoutDep = Annotated[Optional[float], Depends(get_store_timeout)]
