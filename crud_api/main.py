"""Users API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Middleware order: request logging → CORS → API-key guard → routes
    - Global error handlers map CrudApiError → {"error"} / {"errors"} JSON bodies
    - The user store is created with the app and lives on app.state; it is
      passed to handlers through Depends(get_user_store), never imported

Design Decisions:
    - create_app(settings, store) factory: tests build isolated apps with
      their own store; `app` below serves uvicorn
    - Lifespan over @app.on_event: configures logging on startup, reports the
      store size on shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from crud_api import __version__
from crud_api.api.error_handlers import register_error_handlers
from crud_api.api.middleware import register_middleware
from crud_api.api.routes import health, users
from crud_api.config import Settings, get_settings
from crud_api.core.repository_protocols import UserRepository
from crud_api.infrastructure.observability import setup_logging
from crud_api.infrastructure.user_store import UserStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, store: UserRepository | None = None,
) -> FastAPI:
    """Assemble the API: store, middleware chain, error handlers, routes."""
    settings = settings or get_settings()
    if store is None:
        store = UserStore.with_seed_data() if settings.seed_users else UserStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"Users API started with {app.state.user_store.count()} users")
        yield
        logger.info(
            f"Users API shutting down, {app.state.user_store.count()} users discarded",
        )

    app = FastAPI(
        title="Users API",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
    )
    app.state.settings = settings
    app.state.user_store = store

    register_middleware(app, settings)

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(users.router)

    return app


app = create_app()
