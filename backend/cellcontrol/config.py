"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default, so the service starts with an empty environment
    - get_settings() is cached (lru_cache) — single instance per process
    - database_dsn always names an async driver after validation

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Env names kept from the deployment contract: APP_ENV, HTTP_PORT, DATABASE_DSN
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

# Sync driver prefixes → async driver used by the engine
_ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "sqlite://": "sqlite+aiosqlite://",
}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_env: str = "dev"
    http_port: int = Field(8080, ge=1, le=65535)

    # Database
    database_dsn: str = "sqlite+aiosqlite:///./cellcontrol.db"
    database_pool_size: int = 10
    database_max_overflow: int = 5

    @field_validator("database_dsn", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Plain driver URLs (sqlite://, postgresql://) get their async variant."""
        if isinstance(v, str):
            for prefix, replacement in _ASYNC_DRIVERS.items():
                if v.startswith(prefix):
                    return v.replace(prefix, replacement, 1)
        return v

    # API
    cors_origins: list[str] = []

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def masked_dsn(self) -> str:
        """DSN safe for logs — password replaced with ***."""
        return make_url(self.database_dsn).render_as_string(hide_password=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()
