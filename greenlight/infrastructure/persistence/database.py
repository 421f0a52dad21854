import asyncio
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from greenlight.infrastructure.config.settings import Settings

STARTUP_PING_TIMEOUT = 5.0


class _EngineStore:
    engine: Optional[AsyncEngine] = None


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    pool_size = max(settings.DB_MAX_IDLE_CONNS, 1)
    return create_async_engine(
        settings.DATABASE_URL,
        pool_size=pool_size,
        max_overflow=max(settings.DB_MAX_OPEN_CONNS - pool_size, 0),
        pool_recycle=settings.DB_MAX_IDLE_TIME,
        pool_pre_ping=True,
    )


def set_engine(engine: AsyncEngine) -> None:
    _EngineStore.engine = engine


def get_engine() -> AsyncEngine:
    if _EngineStore.engine is None:
        _EngineStore.engine = create_engine_from_settings(Settings())
    return _EngineStore.engine


async def ping_database(engine: AsyncEngine, timeout: float = STARTUP_PING_TIMEOUT) -> None:
    """Check out a pooled connection and run ``SELECT 1`` within ``timeout`` seconds."""

    async def _ping():
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    await asyncio.wait_for(_ping(), timeout=timeout)


async def get_session():
    engine = get_engine()
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


async def dispose_engine() -> None:
    if _EngineStore.engine is not None:
        await _EngineStore.engine.dispose()
        _EngineStore.engine = None
