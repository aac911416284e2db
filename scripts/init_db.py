"""
Script para inicializar la base de datos (crea ai_models y sync_state).
Para entornos con migraciones usar `alembic upgrade head`.
"""
import asyncio
import sys
from pathlib import Path

from loguru import logger

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from leaderboard.infrastructure.database.session import init_db, close_db


async def main():
    """Funcion principal para inicializar la base de datos."""
    logger.info("Inicializando base de datos...")

    try:
        await init_db()
        logger.success("Base de datos inicializada correctamente")
    except Exception as e:
        logger.error(f"Error al inicializar base de datos: {e}")
        raise
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
