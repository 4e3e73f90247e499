#!/usr/bin/env python3
import logging
import os

import uvicorn

from billing.app import create_app
from billing.core.database import init_db

logger = logging.getLogger("billing")

app = create_app()


if __name__ == "__main__":
    init_db()

    host = os.getenv("BILLING_HOST", "127.0.0.1")
    port = int(os.getenv("BILLING_PORT", "8000"))
    reload_enabled = os.getenv("BILLING_DEV_MODE", "false").lower() == "true"

    logger.info("Starting billing API on %s:%d (reload=%s)", host, port, reload_enabled)
    uvicorn.run("main:app", host=host, port=port, reload=reload_enabled)
