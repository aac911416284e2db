"""
Configuracion de fixtures para pytest.
"""
import os

# Antes de importar leaderboard: settings crea el engine al importarse
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from leaderboard.infrastructure.database.session import Base
from leaderboard.infrastructure.database import models  # noqa: F401


# URL de base de datos de prueba
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Sesion sobre una base SQLite en memoria, nueva para cada test.
    """
    # StaticPool: una unica conexion, si no cada conexion veria otra base vacia
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


def make_provider_record(
    source_id: str = "gpt-4o",
    name: str = "GPT-4o",
    company: str = "OpenAI",
    intelligence=70.2,
    **overrides,
) -> dict:
    """Registro con la forma de Artificial Analysis v2."""
    record = {
        "id": source_id,
        "name": name,
        "model_creator": {"name": company},
        "evaluations": {
            "artificial_analysis_intelligence_index": intelligence,
            "artificial_analysis_coding_index": 55.34,
            "artificial_analysis_math_index": 60.0,
            "mmlu_pro": 0.7481,
            "gpqa": 0.5432,
        },
        "pricing": {"price_1m_blended_3_to_1": 2.5},
        "median_output_tokens_per_second": 110.47,
        "median_time_to_first_token_seconds": 0.44,
    }
    record.update(overrides)
    return record


@pytest.fixture
def provider_record():
    return make_provider_record
