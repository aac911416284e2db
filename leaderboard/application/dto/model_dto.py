"""
DTOs relacionados con los modelos del leaderboard.
Definen la estructura de datos que exponen los endpoints de lectura y admin.
"""
import math
from datetime import datetime
from typing import Optional, Dict, Any, List
from pydantic import BaseModel, Field, field_validator

from leaderboard.shared.constants.metric_constants import METRIC_DEFINITIONS, round_half_up
from leaderboard.shared.utils.datetime_utils import ensure_utc


class AIModelDTO(BaseModel):
    """DTO de un modelo tal como se guarda en ai_models."""
    id: int
    source_id: Optional[str] = Field(None, description="ID del proveedor (null si se cargo a mano)")
    name: str
    company: str
    overall_intelligence: float
    benchmark_scores: Dict[str, float] = Field(default_factory=dict)
    description: Optional[str] = None
    last_updated: Optional[datetime] = None

    @field_validator("last_updated")
    @classmethod
    def last_updated_in_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v) if v is not None else None

    @field_validator("benchmark_scores", mode="before")
    @classmethod
    def scores_default(cls, v: Any) -> Any:
        return v or {}

    class Config:
        from_attributes = True


class AIModelCreateDTO(BaseModel):
    """
    DTO para la carga manual de un modelo desde el panel de administracion.

    Solo se aceptan metricas del catalogo; las que vienen en null se descartan.
    """
    name: str = Field(..., min_length=1, max_length=100)
    company: str = Field(..., min_length=1, max_length=100)
    overall_intelligence: float = Field(..., ge=0, le=100, allow_inf_nan=False)
    description: Optional[str] = Field(None, max_length=2000)
    benchmark_scores: Dict[str, Optional[float]] = Field(default_factory=dict)

    @field_validator("name", "company")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("no puede estar vacio")
        return v

    @field_validator("benchmark_scores")
    @classmethod
    def validate_scores(cls, v: Dict[str, Optional[float]]) -> Dict[str, float]:
        unknown = sorted(k for k in v if k not in METRIC_DEFINITIONS)
        if unknown:
            raise ValueError(f"metricas desconocidas: {', '.join(unknown)}")

        scores: Dict[str, float] = {}
        for key, value in v.items():
            if value is None:
                continue
            metric = METRIC_DEFINITIONS[key]
            if not math.isfinite(value) or value < 0 or not metric.in_range(value):
                raise ValueError(f"{key} fuera de rango: {value}")
            scores[key] = round_half_up(value, metric.decimals)
        return scores


class PaginationDTO(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int


class ModelListResponseDTO(BaseModel):
    """Respuesta paginada de GET /models."""
    data: List[AIModelDTO]
    pagination: PaginationDTO
    meta: Dict[str, Any]


class ModelDetailResponseDTO(BaseModel):
    data: AIModelDTO
    meta: Dict[str, Any]


class TopModelDTO(BaseModel):
    id: int
    name: str
    intelligence: float


class CompanyStatsDTO(BaseModel):
    """Estadisticas agregadas por compañia."""
    name: str
    model_count: int
    average_intelligence: float
    top_model: Optional[TopModelDTO] = None
    capabilities: Dict[str, bool] = Field(
        default_factory=dict,
        description="Si algun modelo de la compañia tiene coding/speed"
    )
    last_updated: Optional[datetime] = None


class CompanyListResponseDTO(BaseModel):
    data: List[CompanyStatsDTO]
    meta: Dict[str, Any]


class MetricDefinitionDTO(BaseModel):
    key: str
    name: str
    short_name: str
    description: str
    unit: Optional[str] = None
    higher_is_better: bool
    category: str
    decimals: int


class MetricCatalogResponseDTO(BaseModel):
    data: List[MetricDefinitionDTO]
    categories: Dict[str, Dict[str, str]]
