"""FastAPI application factory."""
from __future__ import annotations
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from ..config import Settings
from ..storage.database import init_db, create_tables, close_db
from ..utils.logging import setup_logging
from .middleware import RequestLoggingMiddleware
from .routes import formatting, health, settings as settings_routes


def create_app(config: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if config is None:
        config = Settings()
    setup_logging(config.log_level, json_logs=config.json_logs)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        init_db(config.database_url.get_secret_value())
        await create_tables()
        yield
        # Shutdown
        await close_db()

    app = FastAPI(
        title="HomeLogger Regional API",
        description="Regional settings and locale-aware formatting",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    # Store config in app state
    app.state.config = config

    # Register routes
    app.include_router(health.router, tags=["health"])
    app.include_router(settings_routes.router, prefix="/settings", tags=["settings"])
    app.include_router(formatting.router, prefix="/format", tags=["format"])

    return app
