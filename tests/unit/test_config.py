"""Settings validation and environment handling."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def test_defaults_run_without_database(monkeypatch) -> None:
    for name in ("DATABASE_URL", "ENVIRONMENT", "CONSTANTS_CACHE_TTL_SECONDS", "JOBS_TABLE"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.database_url == ""
    assert settings.constants_cache_ttl_seconds == 1800
    assert settings.jobs_table == "transformed_jobs"
    assert not settings.is_production


def test_production_flag_is_case_insensitive() -> None:
    assert Settings(_env_file=None, environment=" Production ").is_production


def test_non_postgres_database_url_rejected() -> None:
    with pytest.raises(ValidationError, match="postgres"):
        Settings(_env_file=None, database_url="mysql://user@host/db")


def test_ttl_must_be_positive() -> None:
    with pytest.raises(ValidationError, match="CONSTANTS_CACHE_TTL_SECONDS"):
        Settings(_env_file=None, constants_cache_ttl_seconds=0)


def test_cron_secret_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CRON_SECRET", "abc")
    settings = Settings(_env_file=None)
    assert settings.cron_secret is not None
    assert settings.cron_secret.get_secret_value() == "abc"
