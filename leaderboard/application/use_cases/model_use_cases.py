"""
Casos de uso de lectura y carga manual de modelos del leaderboard.
"""
import csv
import io
import math
from typing import Dict, List, Optional

from loguru import logger

from leaderboard.application.dto.model_dto import (
    AIModelCreateDTO,
    AIModelDTO,
    CompanyListResponseDTO,
    CompanyStatsDTO,
    MetricCatalogResponseDTO,
    MetricDefinitionDTO,
    ModelDetailResponseDTO,
    ModelListResponseDTO,
    PaginationDTO,
    TopModelDTO,
)
from leaderboard.infrastructure.database.models import AIModelModel
from leaderboard.infrastructure.repositories.ai_model_repository import (
    AIModelRepository,
    DEFAULT_SORT,
    SORT_COLUMNS,
)
from leaderboard.shared.constants.metric_constants import (
    METRIC_CATEGORIES,
    METRIC_DEFINITIONS,
    SCORE_DECIMALS,
    round_half_up,
)
from leaderboard.shared.exceptions.domain import ModelNotFoundException, ValidationException
from leaderboard.shared.utils.datetime_utils import ensure_utc, to_iso_string, utc_now


MAX_PAGE_SIZE = 100

CSV_BASE_COLUMNS = ["id", "name", "company", "overall_intelligence"]
CSV_TAIL_COLUMNS = ["description", "last_updated"]


class ModelUseCases:
    """
    Casos de uso para consultar y cargar modelos.
    """

    def __init__(self, repository: AIModelRepository):
        self.repository = repository

    async def list_models(
        self,
        *,
        company: Optional[str] = None,
        sort: str = DEFAULT_SORT,
        page: int = 1,
        page_size: int = 25,
    ) -> ModelListResponseDTO:
        """
        Lista paginada de modelos.

        Raises:
            ValidationException: si el criterio de orden no existe
        """
        if sort not in SORT_COLUMNS:
            raise ValidationException(
                f"Orden no soportado: '{sort}'. Opciones: {', '.join(SORT_COLUMNS)}",
                field="sort",
            )
        page = max(1, page)
        page_size = min(max(1, page_size), MAX_PAGE_SIZE)

        rows, total = await self.repository.list_page(
            company=company or None,
            sort=sort,
            offset=(page - 1) * page_size,
            limit=page_size,
        )
        return ModelListResponseDTO(
            data=[AIModelDTO.model_validate(row) for row in rows],
            pagination=PaginationDTO(
                page=page,
                page_size=page_size,
                total=total,
                total_pages=math.ceil(total / page_size),
            ),
            meta={
                "timestamp": to_iso_string(utc_now()),
                "filters": {"company": company or None, "sort": sort},
            },
        )

    async def get_model(self, model_id: int) -> ModelDetailResponseDTO:
        """
        Obtiene un modelo por su ID.

        Raises:
            ModelNotFoundException: Si el modelo no existe
        """
        model = await self.repository.get_by_id(model_id)
        if not model:
            raise ModelNotFoundException(model_id)
        return ModelDetailResponseDTO(
            data=AIModelDTO.model_validate(model),
            meta={"timestamp": to_iso_string(utc_now())},
        )

    async def create_model(self, dto: AIModelCreateDTO) -> AIModelDTO:
        """Carga manual desde el panel de administracion (sin source_id)."""
        model = await self.repository.create({
            "source_id": None,
            "name": dto.name,
            "company": dto.company,
            "overall_intelligence": round_half_up(dto.overall_intelligence, SCORE_DECIMALS),
            "benchmark_scores": dict(dto.benchmark_scores),
            "description": dto.description,
        })
        logger.info(f"Modelo creado manualmente: {model.name} ({model.company})")
        return AIModelDTO.model_validate(model)

    async def get_company_stats(self) -> CompanyListResponseDTO:
        """Estadisticas por compañia, ordenadas por cantidad de modelos."""
        models = await self.repository.get_all()

        grouped: Dict[str, List[AIModelModel]] = {}
        for model in models:
            grouped.setdefault(model.company, []).append(model)

        companies = [self._company_stats(name, rows) for name, rows in grouped.items()]
        companies.sort(key=lambda c: c.model_count, reverse=True)

        return CompanyListResponseDTO(
            data=companies,
            meta={
                "timestamp": to_iso_string(utc_now()),
                "total_companies": len(companies),
                "total_models": len(models),
            },
        )

    @staticmethod
    def _company_stats(name: str, rows: List[AIModelModel]) -> CompanyStatsDTO:
        top = max(rows, key=lambda m: m.overall_intelligence)
        dates = [ensure_utc(m.last_updated) for m in rows if m.last_updated]
        total = sum(m.overall_intelligence for m in rows)
        return CompanyStatsDTO(
            name=name,
            model_count=len(rows),
            average_intelligence=round_half_up(total / len(rows), 2),
            top_model=TopModelDTO(id=top.id, name=top.name, intelligence=top.overall_intelligence),
            capabilities={
                "coding": any((m.benchmark_scores or {}).get("coding") for m in rows),
                "speed": any((m.benchmark_scores or {}).get("speed") for m in rows),
            },
            last_updated=max(dates) if dates else None,
        )

    async def export_csv(self) -> str:
        """
        Exporta todos los modelos a CSV.
        Una metrica ausente queda como celda vacia.
        """
        metric_keys = list(METRIC_DEFINITIONS)
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_BASE_COLUMNS + metric_keys + CSV_TAIL_COLUMNS)

        for model in await self.repository.get_all():
            scores = model.benchmark_scores or {}
            writer.writerow(
                [model.id, model.name, model.company, model.overall_intelligence]
                + [scores.get(key, "") for key in metric_keys]
                + [model.description or "", to_iso_string(model.last_updated) or ""]
            )
        return buffer.getvalue()

    @staticmethod
    def get_metric_catalog() -> MetricCatalogResponseDTO:
        return MetricCatalogResponseDTO(
            data=[
                MetricDefinitionDTO(
                    key=m.key,
                    name=m.name,
                    short_name=m.short_name,
                    description=m.description,
                    unit=m.unit,
                    higher_is_better=m.higher_is_better,
                    category=m.category.value,
                    decimals=m.decimals,
                )
                for m in METRIC_DEFINITIONS.values()
            ],
            categories={category.value: info for category, info in METRIC_CATEGORIES.items()},
        )
