"""Unit tests for environment-driven settings."""

import pytest

from emr_notifier.configs.database import DatabaseSettings
from emr_notifier.configs.emr import EMRServerlessSettings
from emr_notifier.configs.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove notifier variables that may leak from the host environment."""
    for var in (
        "DB_HOST", "DB_PORT", "DB_USER", "DB_PASSWORD", "DB_NAME",
        "DB_SSLMODE", "DB_SECRET_ARN", "EMR_REGION", "AWS_REGION", "LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


def test_database_settings_from_environment(monkeypatch):
    """Test DB_* variables populate DatabaseSettings."""
    monkeypatch.setenv("DB_HOST", "db.internal")
    monkeypatch.setenv("DB_PORT", "6543")
    monkeypatch.setenv("DB_USER", "notifier")
    monkeypatch.setenv("DB_PASSWORD", "pw")
    monkeypatch.setenv("DB_NAME", "jobs")

    db_config = DatabaseSettings()

    assert db_config.host == "db.internal"
    assert db_config.port == 6543
    assert db_config.user == "notifier"
    assert db_config.password == "pw"
    assert db_config.name == "jobs"
    assert db_config.sslmode == "disable"
    assert db_config.secret_arn is None


def test_async_database_url_without_ssl():
    """Test the asyncpg URL is built from the connection fields."""
    url = DatabaseSettings(host="db.internal", port=5432, user="notifier", password="pw", name="jobs").async_database_url

    assert url.drivername == "postgresql+asyncpg"
    assert url.host == "db.internal"
    assert url.database == "jobs"
    assert url.password == "pw"
    assert dict(url.query) == {}


def test_async_database_url_keeps_special_characters_in_password():
    """Test passwords are carried without manual escaping."""
    url = DatabaseSettings(password="p@ss word/:", sslmode="require").async_database_url

    assert url.password == "p@ss word/:"
    assert url.query["ssl"] == "require"


def test_emr_region_falls_back_to_aws_region(monkeypatch):
    """Test AWS_REGION is used when EMR_REGION is unset."""
    monkeypatch.setenv("AWS_REGION", "ap-southeast-2")

    assert EMRServerlessSettings().region == "ap-southeast-2"


def test_emr_region_prefers_emr_region(monkeypatch):
    """Test EMR_REGION wins over AWS_REGION."""
    monkeypatch.setenv("AWS_REGION", "ap-southeast-2")
    monkeypatch.setenv("EMR_REGION", "eu-west-1")

    assert EMRServerlessSettings().region == "eu-west-1"


def test_settings_aggregate_defaults():
    """Test Settings builds every config module."""
    settings = Settings()

    assert settings.log_level == "INFO"
    assert settings.database.port == 5432
    assert settings.emr.region == "us-east-1"


def test_get_settings_is_cached():
    """Test get_settings returns the same instance."""
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
