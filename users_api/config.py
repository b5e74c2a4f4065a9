"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Secrets come from environment variables or .env, never from source
    - get_settings() is cached (lru_cache): single instance per process
    - DATABASE_URL, when set, wins over the individual DB_* fields

Design Decisions:
    - URL.create over string formatting: passwords with '@' or '/' stay valid
    - DB_PASS accepted alongside DB_PASSWORD (name used by existing deployments)
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
    )

    # Service
    service_name: str = "users-api"
    service_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    db_host: str = "localhost"
    db_port: int = 3306
    db_user: str = "root"
    db_password: str = Field(
        "", validation_alias=AliasChoices("DB_PASS", "DB_PASSWORD"),
    )
    db_name: str = "testdb"
    db_driver: str = "mysql+asyncmy"
    database_url: str | None = None

    database_pool_size: int = 10
    database_max_overflow: int = 0
    database_pool_timeout: int = 30
    database_pool_recycle: int = 3600

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> URL:
        """Connection URL for the async engine."""
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
