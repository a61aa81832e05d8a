"""Store Adapter — async engine, session manager, and startup auto-migration.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)
    - open_store() either returns a migrated store or raises StoreInitError

Design Decisions:
    - No module-level singleton: create_app() owns the manager and passes it down
    - Pool sizing only for server databases; SQLite keeps the driver's default pool
    - expire_on_commit=False: returned rows stay readable after the session closes
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from cellcontrol.config import Settings
from cellcontrol.core.errors import DatabaseError, StoreInitError
from cellcontrol.db.base import Base
import cellcontrol.models  # noqa: F401  (registers tables on Base.metadata)

logger = logging.getLogger(__name__)


def engine_options(database_url: str, pool_size: int, max_overflow: int) -> dict:
    """Pool options for the URL's backend."""
    if make_url(database_url).get_backend_name() == "sqlite":
        return {}
    return {
        "pool_size": pool_size,
        "max_overflow": max_overflow,
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and migration."""

    def __init__(self, database_url: str, **engine_kwargs: Any):
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("Integrity constraint violated", "commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("Connection or operational error", "execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("Database driver error", "query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("Database operation failed", "unknown") from e
        finally:
            await session.close()

    async def migrate(self) -> None:
        """Create missing tables (users) from Base.metadata."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


def build_store(settings: Settings) -> DatabaseSessionManager:
    """Create the engine for settings.database_dsn. Raises StoreInitError."""
    try:
        return DatabaseSessionManager(
            settings.database_dsn,
            **engine_options(
                settings.database_dsn,
                settings.database_pool_size,
                settings.database_max_overflow,
            ),
        )
    except (SQLAlchemyError, ImportError, ValueError) as e:
        logger.error(f"error connecting to database: {e}")
        raise StoreInitError(f"could not connect to database: {e}") from e


async def open_store(settings: Settings) -> DatabaseSessionManager:
    """Connect and auto-migrate. Raises StoreInitError on any failure."""
    store = build_store(settings)
    await migrate_store(store)
    return store


async def migrate_store(store: DatabaseSessionManager) -> None:
    """Run auto-migration on an existing store. Raises StoreInitError on failure."""
    try:
        await store.migrate()
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"error migrating database: {e}")
        await store.dispose()
        raise StoreInitError(f"could not migrate database: {e}") from e
    logger.info("database initialized")
