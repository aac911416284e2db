from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from leaderboard.application.dto.model_dto import ModelDetailResponseDTO, ModelListResponseDTO
from leaderboard.application.use_cases.model_use_cases import MAX_PAGE_SIZE, ModelUseCases
from leaderboard.api.v1.dependencies.use_case_deps import get_model_use_cases
from leaderboard.infrastructure.repositories.ai_model_repository import DEFAULT_SORT

router = APIRouter(prefix="/models", tags=["Models"])


@router.get("", response_model=ModelListResponseDTO)
async def list_models(
    company: Optional[str] = Query(None, description="Filtrar por compañia"),
    sort: str = Query(DEFAULT_SORT, description="overall_intelligence | name | company | recent"),
    page: int = Query(1, ge=1),
    page_size: int = Query(25, ge=1, le=MAX_PAGE_SIZE),
    use_cases: ModelUseCases = Depends(get_model_use_cases)
):
    """
    Listar modelos del leaderboard (paginado).
    """
    return await use_cases.list_models(
        company=company, sort=sort, page=page, page_size=page_size
    )


# Debe registrarse antes de /{model_id}
@router.get("/export")
async def export_models(
    use_cases: ModelUseCases = Depends(get_model_use_cases)
):
    """
    Exportar todos los modelos a CSV.
    """
    content = await use_cases.export_csv()
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="ai_models.csv"'},
    )


@router.get("/{model_id}", response_model=ModelDetailResponseDTO)
async def get_model(
    model_id: int,
    use_cases: ModelUseCases = Depends(get_model_use_cases)
):
    """
    Obtener un modelo por ID.
    """
    return await use_cases.get_model(model_id)
