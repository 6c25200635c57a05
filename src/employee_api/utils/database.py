# src/employee_api/utils/database.py
from __future__ import annotations

import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base

from employee_api.config import Settings

logger = logging.getLogger(__name__)

# Base class for SQLAlchemy ORM models (for declarative base models)
Base = declarative_base()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Build the async engine. Pool sizing only applies to server databases;
    SQLite uses SQLAlchemy's default pool for aiosqlite.
    """
    kwargs = {
        "echo": settings.DB_ECHO,  # Logs all SQL queries if True
        "pool_pre_ping": True,  # Ensures the connections are valid before using them
        "connect_args": {"timeout": settings.DB_TIMEOUT},
    }
    if not settings.is_sqlite:
        kwargs["pool_size"] = settings.DB_POOL_SIZE
        kwargs["max_overflow"] = settings.DB_MAX_OVERFLOW

    engine = create_async_engine(settings.DATABASE_URL, **kwargs)
    # never log the password
    logger.info(
        "Database engine created: %s",
        make_url(settings.DATABASE_URL).render_as_string(hide_password=True),
    )
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,  # To avoid flushing automatically
        expire_on_commit=False,  # Don't expire objects after commit
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables known to ``Base`` (no-op for existing ones)."""
    # register the mappers on Base.metadata
    from employee_api.models import employee  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def ping(engine: AsyncEngine) -> None:
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))


# Dependency to retrieve a database session in FastAPI.
# The session factory is owned by the app (see create_app), not by this module.
async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        yield session
