"""FastAPI application setup."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from glboard import __version__
from glboard.api.dependencies import close_session, init_session
from glboard.api.models import APIResponse
from glboard.api.routes import projects, sync, view
from glboard.cache import ProjectCache
from glboard.config import ConfigError, ConfigStore, config_from_env
from glboard.dashboard import DashboardSession
from glboard.gitlab import GitLabClient
from glboard.logging import DEFAULT_LOG_DIR, setup_logging
from glboard.state_store import StateStore, StateStoreError
from glboard.sync import SyncEngine

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from glboard.sync.engine import ClientFactory

logger = logging.getLogger(__name__)


def build_session(
    store: StateStore,
    client_factory: ClientFactory = GitLabClient,
    max_concurrency: int = 1,
) -> DashboardSession:
    """Wire cache, configuration and sync engine into a display session.

    Environment settings (GITLAB_HOST, GITLAB_TOKEN, ...) are applied on top
    of the stored configuration and saved back.
    """
    config_store = ConfigStore(store)
    config_store.save(config_from_env(config_store.load()))

    cache = ProjectCache(store)
    engine = SyncEngine(
        cache=cache,
        config_store=config_store,
        client_factory=client_factory,
        max_concurrency=max_concurrency,
    )
    return DashboardSession(config_store=config_store, cache=cache, engine=engine)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    if app.state.log_dir is not None:
        setup_logging(log_dir=app.state.log_dir)
    store = StateStore(app.state.db_path)
    session = build_session(
        store,
        client_factory=app.state.client_factory,
        max_concurrency=app.state.max_concurrency,
    )
    init_session(session)
    if app.state.start_timers:
        session.start()

    yield
    # Shutdown
    close_session()
    store.close()


def create_app(
    db_path: str = "glboard.db",
    start_timers: bool = True,
    client_factory: ClientFactory = GitLabClient,
    max_concurrency: int = 1,
    log_dir: str | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="glboard API",
        description="GitLab pipeline dashboard: cached projects and rotating board pages",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.db_path = db_path
    app.state.start_timers = start_timers
    app.state.client_factory = client_factory
    app.state.max_concurrency = max_concurrency
    app.state.log_dir = log_dir

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "PUT", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(ConfigError)
    async def config_error_handler(_request: Request, exc: ConfigError) -> JSONResponse:
        logger.error("Configuration error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Invalid configuration").model_dump(),
        )

    @app.exception_handler(StateStoreError)
    async def state_store_error_handler(_request: Request, exc: StateStoreError) -> JSONResponse:
        logger.error("State store error: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=APIResponse[None](data=None, error="Internal server error").model_dump(),
        )

    app.include_router(view.router, prefix="/api/v1")
    app.include_router(projects.router, prefix="/api/v1")
    app.include_router(sync.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app(log_dir=os.environ.get("GLBOARD_LOG_DIR", DEFAULT_LOG_DIR))
