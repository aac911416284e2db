"""
Endpoints para sincronizacion de modelos con Artificial Analysis.
"""
from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from loguru import logger

from leaderboard.api.v1.dependencies.auth_deps import get_current_admin
from leaderboard.api.v1.dependencies.use_case_deps import get_sync_use_cases
from leaderboard.application.dto.sync_dto import SyncResultDTO
from leaderboard.application.use_cases.sync_use_cases import ModelSyncUseCases


router = APIRouter(prefix="/sync", tags=["Sync"])


@router.post(
    "/models",
    response_model=SyncResultDTO,
    status_code=status.HTTP_200_OK,
    summary="Sincronizar modelos desde Artificial Analysis",
)
async def sync_models(
    admin: Dict[str, Any] = Depends(get_current_admin),
    use_cases: ModelSyncUseCases = Depends(get_sync_use_cases),
) -> SyncResultDTO:
    """
    Ejecuta el sync de modelos.

    - 200: {updated, total, skipped}
    - 401: sin token de administrador
    - 429: ya hubo un sync dentro del intervalo minimo
    - 500: sync no configurado o fallo el proveedor
    """
    logger.info(f"Sync de modelos solicitado por '{admin.get('sub')}'")
    result = await use_cases.run_sync()
    return SyncResultDTO.model_validate(result.to_dict())
