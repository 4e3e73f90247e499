#!/usr/bin/env python3
"""
Create the billing tables and load the placeholder reference data.

Safe to run repeatedly: rows that already exist are skipped.
"""
import argparse
import asyncio
import logging
import sys

from billing.core.config import get_settings
from billing.core.database import build_engine, create_all_tables
from billing.core.exceptions import BillingError
from billing.core.logging import configure_logging
from billing.core.store import StoreClient
from billing.seed.service import SeedService

logger = logging.getLogger("billing.seed")


def parse_args(argv=None):
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Seed the billing database")
    parser.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy database URL")
    parser.add_argument("--bcrypt-rounds", type=int, default=settings.bcrypt_rounds, help="bcrypt cost factor")
    parser.add_argument("--skip-create", action="store_true", help="Do not create missing tables first")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(get_settings().log_level)

    engine = build_engine(args.database_url)
    if not args.skip_create:
        create_all_tables(engine)

    service = SeedService(
        StoreClient(engine),
        timeout=get_settings().store_timeout_seconds,
        bcrypt_rounds=args.bcrypt_rounds,
    )
    try:
        report = asyncio.run(service.seed_all())
    except BillingError as exc:
        logger.error("Database seeding failed: %s", exc.message)
        return 1
    finally:
        engine.dispose()

    logger.info("Database seeded successfully: %s", report.model_dump())
    return 0


if __name__ == "__main__":
    sys.exit(main())
