"""Settings: environment loading and connection URL assembly."""

import pytest

from users_api.config import Settings

DB_VARS = (
    "DATABASE_URL", "DB_HOST", "DB_PORT", "DB_USER", "DB_PASS", "DB_PASSWORD",
    "DB_NAME", "DB_DRIVER", "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for var in DB_VARS:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    url = settings.sqlalchemy_url
    assert url.drivername == "mysql+asyncmy"
    assert url.host == "localhost"
    assert url.port == 3306
    assert url.username == "root"
    assert url.password is None
    assert url.database == "testdb"


def test_db_vars_build_url(clean_env):
    clean_env.setenv("DB_HOST", "db.internal")
    clean_env.setenv("DB_USER", "app")
    clean_env.setenv("DB_PASS", "p@ss/word")
    clean_env.setenv("DB_NAME", "people")
    clean_env.setenv("DB_PORT", "3307")
    url = Settings(_env_file=None).sqlalchemy_url
    assert url.host == "db.internal"
    assert url.username == "app"
    assert url.password == "p@ss/word"
    assert url.database == "people"
    assert url.port == 3307


def test_db_password_alias(clean_env):
    clean_env.setenv("DB_PASSWORD", "secret")
    assert Settings(_env_file=None).db_password == "secret"


def test_database_url_overrides_fields(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
    clean_env.setenv("DB_HOST", "ignored")
    url = Settings(_env_file=None).sqlalchemy_url
    assert url.drivername == "sqlite+aiosqlite"
    assert url.database == ":memory:"


def test_port_from_env(clean_env):
    clean_env.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080
