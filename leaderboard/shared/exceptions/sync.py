"""
Excepciones del sync de modelos con el proveedor de benchmarks.

Las excepciones de lote (configuracion, rate limit, fetch) abortan la corrida
y se devuelven al cliente como un unico error. Los errores por registro
(RecordValidationError) nunca salen del caso de uso: se convierten en
entradas de `skipped`.
"""
from typing import Optional

from leaderboard.shared.exceptions.base import AppException


class SyncConfigurationException(AppException):
    """Falta configuracion obligatoria para ejecutar el sync (API key)."""

    def __init__(self, setting_name: str):
        super().__init__(
            message=f"Sync no configurado: falta la variable {setting_name}",
            status_code=500,
            error_code="SYNC_NOT_CONFIGURED",
            details={"setting": setting_name},
        )


class SyncRateLimitException(AppException):
    """Se pidio un sync antes de que transcurra el intervalo minimo."""

    def __init__(self, retry_after_seconds: int):
        super().__init__(
            message=(
                "Ya se ejecuto un sync recientemente. "
                f"Intenta nuevamente en {retry_after_seconds} segundos."
            ),
            status_code=429,
            error_code="SYNC_RATE_LIMITED",
            details={"retry_after_seconds": retry_after_seconds},
        )


class ProviderFetchException(AppException):
    """
    Fallo al obtener el catalogo del proveedor.

    El texto devuelto por el proveedor no se expone al cliente; queda en logs.
    """

    def __init__(self, status_code: Optional[int] = None):
        details = {"provider_status": status_code} if status_code else {}
        super().__init__(
            message="No se pudo obtener el catalogo de modelos del proveedor",
            status_code=500,
            error_code="PROVIDER_FETCH_ERROR",
            details=details,
        )


class RecordValidationError(ValueError):
    """Registro del proveedor invalido. Se recupera localmente como skip."""

    def __init__(self, record_id: Optional[str], name: Optional[str], reason: str):
        self.record_id = record_id
        self.name = name
        self.reason = reason
        super().__init__(f"{record_id or '<sin id>'}: {reason}")
