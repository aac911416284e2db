"""
Engine y sesiones async de SQLAlchemy.

- Postgres (asyncpg) en produccion, con pool de conexiones
- SQLite (aiosqlite) para desarrollo local y tests
"""
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.orm import declarative_base

from leaderboard.core.config import settings


Base = declarative_base()


def _engine_kwargs(database_url: str) -> dict:
    """Opciones del engine segun el driver de la URL."""
    kwargs = {"echo": settings.DEBUG}
    if database_url.startswith("postgresql"):
        kwargs.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_pre_ping=True,
        )
    return kwargs


engine = create_async_engine(
    settings.effective_database_url,
    **_engine_kwargs(settings.effective_database_url)
)

# expire_on_commit=False: el sync hace commit por registro y sigue leyendo
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependencia de FastAPI: una sesion por request.
    Hace commit al terminar sin errores y rollback si el endpoint falla.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Sesion para jobs fuera de un request (scheduler, scripts)."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_db() -> None:
    """Crea las tablas que no existan (ai_models, sync_state)."""
    from leaderboard.infrastructure.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def close_db() -> None:
    await engine.dispose()
