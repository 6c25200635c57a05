# src/employee_api/app.py
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from employee_api.config import Settings, get_settings
from employee_api.middleware.security_headers import security_headers_middleware
from employee_api.routes.employees_api import router as employees_router
from employee_api.utils.database import (
    create_engine_from_settings,
    create_session_factory,
    init_models,
    ping,
)
from employee_api.utils.error_handler import register_exception_handlers
from employee_api.utils.logger import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, engine: Optional[AsyncEngine] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The engine and session factory live on ``app.state`` and are handed to
    each request through ``get_db``; nothing holds a global connection.
    Pass ``engine`` to reuse an existing one (tests, embedding).
    """
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    owns_engine = engine is None
    engine = engine or create_engine_from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.DB_CREATE_ALL:
            await init_models(engine)
            logger.info("Database schema ready")
        yield
        if owns_engine:
            await engine.dispose()

    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    # ----------------------------------------------------------
    # CORS & SECURITY HEADERS
    # ----------------------------------------------------------
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if settings.SECURITY_HEADERS:
        app.middleware("http")(security_headers_middleware)

    # ----------------------------------------------------------
    # ERROR HANDLERS
    # ----------------------------------------------------------
    register_exception_handlers(app)

    # ----------------------------------------------------------
    # ROUTERS
    # ----------------------------------------------------------
    app.include_router(employees_router, prefix=settings.API_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health():
        await ping(app.state.engine)
        return {"status": "ok"}

    return app
