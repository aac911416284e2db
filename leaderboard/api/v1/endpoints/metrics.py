from fastapi import APIRouter

from leaderboard.application.dto.model_dto import MetricCatalogResponseDTO
from leaderboard.application.use_cases.model_use_cases import ModelUseCases

router = APIRouter(prefix="/metrics", tags=["Metrics"])


@router.get("", response_model=MetricCatalogResponseDTO)
async def list_metrics():
    """
    Catalogo de metricas de benchmark_scores.
    """
    return ModelUseCases.get_metric_catalog()
