"""CellControl API — FastAPI application factory and process entry point.

Invariants:
    - Wiring is explicit: store → repository → service → handler, built once in create_app
    - Routes registered explicitly (no auto-discovery)
    - Store auto-migrates on startup; failure aborts startup (no listener)
    - /health is unversioned; user routes live under /api/v1

Design Decisions:
    - Factory over module-level app: no import-time engine, tests inject their own store
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - uvicorn with lifespan="on": a failing startup exits the process
"""

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cellcontrol.api.error_handlers import register_error_handlers
from cellcontrol.api.routes import health
from cellcontrol.api.routes.users import UserHandler
from cellcontrol.config import Settings, get_settings
from cellcontrol.infrastructure.database import (
    DatabaseSessionManager, build_store, migrate_store,
)
from cellcontrol.infrastructure.observability import (
    install_access_log, setup_logging,
)
from cellcontrol.infrastructure.user_repository import SqlAlchemyUserRepository
from cellcontrol.services.user_service import UserService

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


def create_app(
    settings: Settings | None = None,
    store: DatabaseSessionManager | None = None,
) -> FastAPI:
    """Build the application.

    When ``store`` is given the caller owns it: it is neither migrated nor
    disposed by the lifespan.
    """
    if settings is None:
        settings = get_settings()
    owns_store = store is None
    if store is None:
        store = build_store(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if owns_store:
            await migrate_store(store)
        logger.info("CellControl API started")
        yield
        if owns_store:
            await store.dispose()
        logger.info("CellControl API shutting down")

    app = FastAPI(title="CellControl API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_access_log(app)
    register_error_handlers(app)

    repository = SqlAlchemyUserRepository(store)
    service = UserService(repository)
    user_handler = UserHandler(service)

    app.include_router(health.router)
    api = APIRouter(prefix=API_PREFIX)
    user_handler.register_routes(api)
    app.include_router(api)

    return app


def run() -> None:
    """Console entry point: load settings, then serve with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"[config] env={settings.app_env} port={settings.http_port} "
        f"db={settings.masked_dsn()}",
        extra={"app_env": settings.app_env, "http_port": settings.http_port},
    )
    app = create_app(settings)
    logger.info(f"listening on :{settings.http_port}")
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=settings.http_port,
        lifespan="on",
        log_level=settings.log_level.lower(),
    )
