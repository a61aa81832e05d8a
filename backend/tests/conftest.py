"""Root conftest — shared test configuration and store fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database with the users table
    - Settings never read a developer's .env file

Design Decisions:
    - StaticPool: every session shares the single in-memory connection
"""

import os

import pytest
from sqlalchemy.pool import StaticPool

from cellcontrol.config import Settings, get_settings
from cellcontrol.infrastructure.database import DatabaseSessionManager

os.environ.setdefault("DATABASE_DSN", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

IN_MEMORY_DSN = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings():
    return Settings(
        database_dsn=IN_MEMORY_DSN, log_format="text", _env_file=None,
    )


@pytest.fixture
async def test_store():
    store = DatabaseSessionManager(IN_MEMORY_DSN, poolclass=StaticPool)
    await store.migrate()
    yield store
    await store.dispose()
