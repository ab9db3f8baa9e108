"""Settings - database URL normalisation and defaults."""

import pytest

from guestlist.config import Settings, normalize_database_url


@pytest.mark.parametrize("url", [
    "postgresql://u:p@host:5432/db",
    "postgres://u:p@host:5432/db",
])
def test_plain_postgres_urls_get_asyncpg_driver(url):
    assert normalize_database_url(url) == "postgresql+asyncpg://u:p@host:5432/db"


def test_other_urls_untouched():
    url = "sqlite+aiosqlite:///:memory:"
    assert normalize_database_url(url) == url


def test_settings_apply_normalisation():
    settings = Settings(database_url="postgres://u:p@host/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host/db"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("ADMIN_PASSWORD", "door-staff")
    monkeypatch.setenv("DATABASE_SSL", "true")
    settings = Settings()
    assert settings.admin_password == "door-staff"
    assert settings.database_ssl is True
