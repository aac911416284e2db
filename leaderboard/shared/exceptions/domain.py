"""
Excepciones relacionadas con la lógica de dominio.
"""
from typing import Any

from leaderboard.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class ModelNotFoundException(DomainException):
    """Excepcion cuando no se encuentra un modelo del leaderboard."""

    def __init__(self, model_id: Any):
        super().__init__(
            message=f"Modelo con ID '{model_id}' no encontrado",
            error_code="MODEL_NOT_FOUND",
            details={"model_id": str(model_id)}
        )
        self.status_code = 404


class ValidationException(DomainException):
    """Excepción para errores de validación."""

    def __init__(self, message: str, field: str = None):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details
        )
