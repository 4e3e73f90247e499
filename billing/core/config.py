# billing/core/config.py
"""Environment-driven settings for the billing service."""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    """Runtime configuration read from the environment (and an optional .env file)."""

    database_url: str = "sqlite:///./billing.db"
    store_timeout_seconds: Optional[float] = 10.0
    bcrypt_rounds: int = 10
    log_level: str = "INFO"
    application_id: str = "billing"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()

        raw_timeout = os.getenv("STORE_TIMEOUT_SECONDS", "").strip()
        timeout = float(raw_timeout) if raw_timeout else cls.store_timeout_seconds
        # 0 disables the per-operation timeout
        if timeout is not None and timeout <= 0:
            timeout = None

        return cls(
            database_url=os.getenv("DATABASE_URL", cls.database_url).strip(),
            store_timeout_seconds=timeout,
            bcrypt_rounds=int(os.getenv("BCRYPT_ROUNDS", str(cls.bcrypt_rounds))),
            log_level=os.getenv("LOG_LEVEL", cls.log_level).upper(),
            application_id=os.getenv("APPLICATION_ID", cls.application_id),
        )


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
