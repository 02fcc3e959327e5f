"""PostgreSQL database connection and session management."""

import threading

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel

from blogsum.config import get_settings

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None
_init_lock = threading.Lock()


def get_engine() -> AsyncEngine:
    """Return the shared engine, creating it on first use."""
    global _engine, _session_factory
    if _engine is None:
        with _init_lock:
            if _engine is None:
                settings = get_settings()
                # pool_pre_ping replaces connections dropped by the server
                _engine = create_async_engine(
                    settings.database_url,
                    echo=settings.debug,
                    pool_pre_ping=True,
                )
                _session_factory = async_sessionmaker(
                    _engine,
                    class_=AsyncSession,
                    expire_on_commit=False,
                )
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Return the shared session factory."""
    get_engine()
    if _session_factory is None:
        raise RuntimeError("Database engine was disposed while creating a session factory")
    return _session_factory


async def init_db(engine: AsyncEngine | None = None) -> None:
    """Initialize database tables."""
    import blogsum.models  # noqa: F401  registers tables on the metadata

    async with (engine or get_engine()).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def dispose_engine() -> None:
    """Close all pooled connections."""
    global _engine, _session_factory
    with _init_lock:
        engine, _engine, _session_factory = _engine, None, None
    if engine is not None:
        await engine.dispose()
