"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All credentials come from environment variables (never hardcoded, never logged)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - Connection parts (POSTGRES_*) are assembled with sqlalchemy URL.create so
      credentials are escaped; DATABASE_URL, when set, replaces them entirely
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    postgres_host: str = "localhost"
    postgres_user: str = ""
    postgres_password: str = ""
    postgres_db: str = ""
    postgres_port: int = 5432
    database_url: str | None = None

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Plain postgresql:// URLs need the asyncpg driver suffix."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    # HTTP
    port: int = 8080

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.postgres_user or None,
            password=self.postgres_password or None,
            host=self.postgres_host,
            port=self.postgres_port,
            database=self.postgres_db or None,
        ).render_as_string(hide_password=False)

    @property
    def safe_database_url(self) -> str:
        """Connection URL with the password masked, for log lines."""
        return make_url(self.sqlalchemy_url).render_as_string(
            hide_password=True,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
