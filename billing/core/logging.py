# billing/core/logging.py
"""Logging setup shared by the API, the seed script and the tests."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stream handler on the root logger unless one is already configured."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # SQLAlchemy echoes every statement at INFO otherwise
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
