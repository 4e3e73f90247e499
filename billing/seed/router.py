import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from billing.core.config import get_settings
from billing.core.dependencies import StoreDep, TimeoutDep
from billing.core.exceptions import BillingError
from billing.seed.service import SeedService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/seed", tags=["Seed"])


def get_seed_service(store: StoreDep, timeout: TimeoutDep) -> SeedService:
    return SeedService(store, timeout=timeout, bcrypt_rounds=get_settings().bcrypt_rounds)


@router.get("")
async def seed_database(service: Annotated[SeedService, Depends(get_seed_service)]):
    try:
        report = await service.seed_all()
    except BillingError as exc:
        logger.error("Database seeding error: %s", exc.message)
        return JSONResponse(status_code=500, content={"error": exc.message})
    return {"message": "Database seeded successfully", "inserted": report.model_dump()}
