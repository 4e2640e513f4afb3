"""Unit tests for environment-driven settings."""

from __future__ import annotations

import pytest

from meetups.core.config import DEFAULT_JWT_ALGORITHM
from meetups.core.config import get_settings
from meetups.core.config import redact_secret


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEETUPS_DATABASE_URL", "postgresql+psycopg://app:pw@db:5432/meetups")
    monkeypatch.setenv("MEETUPS_JWT_SECRET", "s3cret")
    monkeypatch.setenv("MEETUPS_LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("MEETUPS_JWT_ALGORITHM", raising=False)

    settings = get_settings()

    assert settings.database_url == "postgresql+psycopg://app:pw@db:5432/meetups"
    assert settings.jwt_secret == "s3cret"
    assert settings.jwt_algorithm == DEFAULT_JWT_ALGORITHM
    assert settings.log_level == "DEBUG"


def test_safe_for_logging_hides_credentials(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MEETUPS_DATABASE_URL", "postgresql+psycopg://app:pw@db:5432/meetups")
    monkeypatch.setenv("MEETUPS_JWT_SECRET", "s3cret")

    safe = get_settings().safe_for_logging()

    assert safe["jwt_secret"] == "<redacted>"
    assert "pw" not in safe["database_url"]
    assert safe["database_url"] == "db:5432/meetups"


def test_redact_secret_marks_empty_values() -> None:
    assert redact_secret("") == "<empty>"
    assert redact_secret("x") == "<redacted>"
