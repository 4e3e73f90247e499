"""
Unit tests for configuration, password hashing and the HTTP error mapping.
"""

import pytest

from billing.core.config import Settings
from billing.core.exception_handlers import status_code_for
from billing.core.exceptions import (
    BillingError,
    IntegrityViolationError,
    InvalidInputError,
    NotFoundError,
    OperationCancelledError,
    StoreUnavailableError,
)
from billing.users.security import hash_password, verify_password


class TestSettings:
    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        for name in ("DATABASE_URL", "STORE_TIMEOUT_SECONDS", "BCRYPT_ROUNDS", "LOG_LEVEL", "APPLICATION_ID"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self):
        settings = Settings.from_env()
        assert settings.database_url == "sqlite:///./billing.db"
        assert settings.store_timeout_seconds == 10.0
        assert settings.bcrypt_rounds == 10
        assert settings.log_level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("DATABASE_URL", "postgresql://billing@db/billing")
        monkeypatch.setenv("STORE_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("BCRYPT_ROUNDS", "12")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.database_url == "postgresql://billing@db/billing"
        assert settings.store_timeout_seconds == 2.5
        assert settings.bcrypt_rounds == 12
        assert settings.log_level == "DEBUG"

    def test_zero_timeout_disables_it(self, monkeypatch):
        monkeypatch.setenv("STORE_TIMEOUT_SECONDS", "0")
        assert Settings.from_env().store_timeout_seconds is None


class TestPasswordHashing:
    def test_hash_and_verify(self):
        hashed = hash_password("123456", rounds=4)
        assert hashed.startswith("$2")
        assert verify_password("123456", hashed)
        assert not verify_password("654321", hashed)

    def test_salted(self):
        assert hash_password("123456", rounds=4) != hash_password("123456", rounds=4)

    def test_empty_password_rejected(self):
        with pytest.raises(ValueError):
            hash_password("")

    def test_malformed_hash_does_not_verify(self):
        assert not verify_password("123456", "not-a-bcrypt-hash")


class TestStatusMapping:
    @pytest.mark.parametrize(
        "error, status_code",
        [
            (InvalidInputError("bad page"), 422),
            (NotFoundError("missing"), 404),
            (IntegrityViolationError("Failed to fetch invoices."), 409),
            (OperationCancelledError("Failed to fetch card data."), 504),
            (StoreUnavailableError("Failed to fetch revenue data."), 500),
            (BillingError("anything else"), 500),
        ],
    )
    def test_status_codes(self, error, status_code):
        assert status_code_for(error) == status_code
