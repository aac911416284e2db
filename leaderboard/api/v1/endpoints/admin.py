"""
Endpoints del panel de administracion.
Todos requieren token de administrador.
"""
from fastapi import APIRouter, Depends, status

from leaderboard.api.v1.dependencies.auth_deps import get_current_admin
from leaderboard.api.v1.dependencies.use_case_deps import get_model_use_cases, get_sync_use_cases
from leaderboard.application.dto.model_dto import AIModelCreateDTO, AIModelDTO
from leaderboard.application.dto.sync_dto import SyncStatusDTO
from leaderboard.application.use_cases.model_use_cases import ModelUseCases
from leaderboard.application.use_cases.sync_use_cases import ModelSyncUseCases


router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(get_current_admin)],
)


@router.post("/models", response_model=AIModelDTO, status_code=status.HTTP_201_CREATED)
async def create_model(
    dto: AIModelCreateDTO,
    use_cases: ModelUseCases = Depends(get_model_use_cases),
):
    """
    Agregar un modelo manualmente.
    """
    return await use_cases.create_model(dto)


@router.get("/sync/status", response_model=SyncStatusDTO)
async def get_sync_status(
    use_cases: ModelSyncUseCases = Depends(get_sync_use_cases),
) -> SyncStatusDTO:
    """
    Estado de la ultima corrida del sync.
    """
    return await use_cases.get_status()
