# billing/core/database.py
"""Database configuration for the billing store."""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from billing.core.config import get_settings

logger = logging.getLogger(__name__)

# Base class for all models
Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    # SQLite ships with foreign key enforcement switched off per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()
    # Built-in lower() folds ASCII only
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``; SQLite gets foreign keys and a Unicode lower()."""
    is_sqlite = database_url.startswith("sqlite")
    engine = create_engine(
        database_url,
        connect_args={"check_same_thread": False} if is_sqlite else {},
        pool_pre_ping=not is_sqlite,
    )
    if is_sqlite:
        event.listen(engine, "connect", _configure_sqlite_connection)
    return engine


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


engine = build_engine(get_settings().database_url)


# ===== TABLE CREATION =====


def _register_models() -> None:
    # Import models so they are registered on Base.metadata
    from billing.customers.models import Customer  # noqa: F401
    from billing.invoices.models import Invoice  # noqa: F401
    from billing.revenue.models import Revenue  # noqa: F401
    from billing.users.models import User  # noqa: F401


def create_all_tables(bind: Engine = None) -> None:
    """Create every billing table that does not exist yet."""
    _register_models()
    Base.metadata.create_all(bind=bind or engine)


def drop_all_tables(bind: Engine = None) -> None:
    """Drop every billing table (use with caution!)."""
    _register_models()
    Base.metadata.drop_all(bind=bind or engine)


def init_db(force_recreate: bool = False) -> None:
    """Initialize the schema on the configured database."""
    if force_recreate:
        logger.warning("Force recreate mode: dropping existing tables")
        drop_all_tables()
    create_all_tables()
    logger.info("Database tables ready on %s", engine.url.render_as_string(hide_password=True))
