from fastapi import APIRouter, Depends

from leaderboard.application.dto.model_dto import CompanyListResponseDTO
from leaderboard.application.use_cases.model_use_cases import ModelUseCases
from leaderboard.api.v1.dependencies.use_case_deps import get_model_use_cases

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("", response_model=CompanyListResponseDTO)
async def list_companies(
    use_cases: ModelUseCases = Depends(get_model_use_cases)
):
    """
    Estadisticas por compañia (cantidad de modelos, promedio, top model).
    """
    return await use_cases.get_company_stats()
