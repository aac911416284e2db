"""
Data Transfer Objects (DTOs) para la capa de aplicacion.
"""
from .model_dto import (
    AIModelDTO,
    AIModelCreateDTO,
    PaginationDTO,
    ModelListResponseDTO,
    ModelDetailResponseDTO,
    TopModelDTO,
    CompanyStatsDTO,
    CompanyListResponseDTO,
    MetricDefinitionDTO,
    MetricCatalogResponseDTO,
)
from .sync_dto import SkippedRecordDTO, SyncResultDTO, SyncStatusDTO
from .auth_dto import AuthLoginRequestDTO, AuthTokenResponseDTO

__all__ = [
    "AIModelDTO",
    "AIModelCreateDTO",
    "PaginationDTO",
    "ModelListResponseDTO",
    "ModelDetailResponseDTO",
    "TopModelDTO",
    "CompanyStatsDTO",
    "CompanyListResponseDTO",
    "MetricDefinitionDTO",
    "MetricCatalogResponseDTO",
    "SkippedRecordDTO",
    "SyncResultDTO",
    "SyncStatusDTO",
    "AuthLoginRequestDTO",
    "AuthTokenResponseDTO",
]
