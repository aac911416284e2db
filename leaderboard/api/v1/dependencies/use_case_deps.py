"""
Dependencias para inyeccion de casos de uso.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from leaderboard.application.use_cases.auth_use_cases import AuthUseCases
from leaderboard.application.use_cases.model_use_cases import ModelUseCases
from leaderboard.application.use_cases.sync_use_cases import ModelSyncUseCases
from leaderboard.core.config import settings
from leaderboard.infrastructure.database.session import get_db
from leaderboard.infrastructure.repositories.ai_model_repository import AIModelRepository
from leaderboard.infrastructure.security.single_user_auth_service import SingleUserAuthService


async def get_model_use_cases(
    db: AsyncSession = Depends(get_db)
) -> ModelUseCases:
    """
    Dependencia para obtener los casos de uso de modelos.

    Args:
        db: Sesion de base de datos

    Returns:
        ModelUseCases: Instancia de casos de uso de modelos
    """
    return ModelUseCases(AIModelRepository(db))


async def get_sync_use_cases(
    db: AsyncSession = Depends(get_db)
) -> ModelSyncUseCases:
    """Dependencia para el orquestador del sync (config tomada de settings)."""
    return ModelSyncUseCases(db)


def get_auth_use_cases() -> AuthUseCases:
    return AuthUseCases(
        SingleUserAuthService(
            expected_username=settings.ADMIN_USERNAME,
            expected_password=settings.ADMIN_PASSWORD,
        )
    )
