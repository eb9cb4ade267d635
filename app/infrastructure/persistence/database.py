"""Persistence: async engine and session factory for the jobs database.

The jobs table lives in the job board's managed Postgres (Supabase). This
service only reads from it; schema is owned elsewhere.

Engine and session factory are created lazily on first use
(get_session_factory) so import does not trigger Settings
validation. When DATABASE_URL is empty no engine is created and the
factory is None (the repository then raises SqlNotConfiguredException).
"""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import get_settings

logger = logging.getLogger(__name__)

# Set by _ensure_engine() on first use; avoids get_settings() at import time.
engine: Any = None
AsyncSessionLocal: async_sessionmaker[AsyncSession] | None = None


def _ensure_engine() -> None:
    """Create engine and AsyncSessionLocal on first use (only when DATABASE_URL is set)."""
    global engine, AsyncSessionLocal
    if AsyncSessionLocal is not None:
        return
    settings = get_settings()
    if not settings.database_url:
        return
    pool_size = settings.db_pool_size if settings.db_pool_size is not None else 5
    max_overflow = settings.db_max_overflow if settings.db_max_overflow is not None else 10
    command_timeout = (
        settings.db_command_timeout if settings.db_command_timeout is not None else 30
    )
    connect_args: dict[str, Any] = {}
    if "asyncpg" in settings.database_url:
        connect_args["command_timeout"] = command_timeout
        # Supabase's transaction pooler does not support prepared statement caching.
        connect_args["statement_cache_size"] = 0
    engine = create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=max_overflow,
        pool_recycle=3600,
        connect_args=connect_args,
    )
    AsyncSessionLocal = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


def get_session_factory() -> async_sessionmaker[AsyncSession] | None:
    """Return the session factory, or None when no database is configured."""
    _ensure_engine()
    return AsyncSessionLocal


async def dispose_engine() -> None:
    """Dispose the engine on shutdown (no-op if it was never created)."""
    global engine, AsyncSessionLocal
    if engine is not None:
        await engine.dispose()
        logger.info("Database engine disposed")
    engine = None
    AsyncSessionLocal = None
