"""
Casos de uso para el sync de modelos con Artificial Analysis.

Flujo de una corrida:
    config -> rate limit -> fetch -> normalize -> reconcile

- Los errores de lote (config, rate limit, fetch) abortan la corrida.
- Los errores por registro (validacion o escritura) terminan en `skipped`.
"""
import asyncio
from datetime import timedelta
from typing import Callable, Optional

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from leaderboard.application.dto.sync_dto import SyncStatusDTO
from leaderboard.application.services.model_normalizer import ModelNormalizer
from leaderboard.core.config import settings
from leaderboard.domain.entities.ai_model import SkippedRecord, SyncResult
from leaderboard.infrastructure.database.session import session_scope
from leaderboard.infrastructure.external.artificial_analysis import (
    ArtificialAnalysisApiError,
    ArtificialAnalysisClient,
)
from leaderboard.infrastructure.repositories.ai_model_repository import AIModelRepository
from leaderboard.infrastructure.repositories.sync_state_repository import SyncStateRepository
from leaderboard.shared.exceptions.base import AppException
from leaderboard.shared.exceptions.sync import (
    ProviderFetchException,
    SyncConfigurationException,
    SyncRateLimitException,
)
from leaderboard.shared.utils.datetime_utils import ensure_utc, utc_now


SYNC_JOB_NAME = "model_sync"
WRITE_FAILED_REASON = "Write failed"


class ModelSyncUseCases:
    """
    Orquestador del sync de modelos.

    El cliente HTTP es bloqueante (requests), por eso el fetch corre en un
    thread con asyncio.to_thread.
    """

    def __init__(
        self,
        db: AsyncSession,
        client: Optional[ArtificialAnalysisClient] = None,
        normalizer: Optional[ModelNormalizer] = None,
        *,
        api_key: Optional[str] = None,
        min_interval_seconds: Optional[int] = None,
        now_fn: Callable = utc_now,
    ):
        self.db = db
        self.models = AIModelRepository(db)
        self.state = SyncStateRepository(db)
        self.normalizer = normalizer or ModelNormalizer()
        self._api_key = settings.ARTIFICIAL_ANALYSIS_API_KEY if api_key is None else api_key
        self._client = client
        self._min_interval = timedelta(
            seconds=settings.SYNC_MIN_INTERVAL_SECONDS
            if min_interval_seconds is None
            else min_interval_seconds
        )
        self._now = now_fn

    def _get_client(self) -> ArtificialAnalysisClient:
        if self._client is None:
            self._client = ArtificialAnalysisClient(
                self._api_key,
                base_url=settings.ARTIFICIAL_ANALYSIS_BASE_URL,
                timeout_s=settings.ARTIFICIAL_ANALYSIS_TIMEOUT_SECONDS,
                max_retries=settings.ARTIFICIAL_ANALYSIS_MAX_RETRIES,
            )
        return self._client

    async def run_sync(self) -> SyncResult:
        """
        Ejecuta una corrida completa del sync.

        Raises:
            SyncConfigurationException: falta ARTIFICIAL_ANALYSIS_API_KEY
            SyncRateLimitException: hubo una corrida dentro del intervalo minimo
            ProviderFetchException: no se pudo obtener el catalogo
        """
        if not self._api_key:
            logger.error("Sync abortado: ARTIFICIAL_ANALYSIS_API_KEY no configurada")
            raise SyncConfigurationException("ARTIFICIAL_ANALYSIS_API_KEY")

        await self._claim_run()

        try:
            result = await self._fetch_and_reconcile()
        except ArtificialAnalysisApiError as e:
            logger.error(f"Fallo el fetch a Artificial Analysis: {e}")
            await self._finish_run("error", str(e))
            raise ProviderFetchException(e.status_code) from e
        except (Exception, asyncio.CancelledError) as e:
            # La corrida ya quedo "running": se cierra como error antes de propagar
            logger.exception(f"Sync interrumpido: {e!r}")
            await self.db.rollback()
            await self._finish_run("error", str(e) or type(e).__name__)
            raise

        await self._finish_run("success", None)
        logger.success(
            f"Sync completado: {result.updated} actualizados, "
            f"{len(result.skipped)} omitidos de {result.total}"
        )
        return result

    async def _fetch_and_reconcile(self) -> SyncResult:
        # 1. Fetch
        logger.info("Iniciando sync de modelos desde Artificial Analysis")
        records = await asyncio.to_thread(self._get_client().fetch_models)
        logger.info(f"Artificial Analysis devolvio {len(records)} registros")

        # 2. Normalize
        outcome = self.normalizer.normalize_batch(records)
        result = SyncResult(total=len(records), skipped=list(outcome.skipped))

        # 3. Reconcile: una transaccion por registro
        for model in outcome.valid:
            try:
                await self.models.upsert_by_source_id(model.to_row(), synced_at=self._now())
                await self.db.commit()
                result.updated += 1
            except SQLAlchemyError as e:
                await self.db.rollback()
                logger.error(f"No se pudo guardar el modelo {model.source_id}: {e}")
                result.skipped.append(
                    SkippedRecord(id=model.source_id, name=model.name, reason=WRITE_FAILED_REASON)
                )
        return result

    async def _claim_run(self) -> None:
        """Reclama el slot del rate limit y lo confirma antes del fetch."""
        now = self._now()
        claimed = await self.state.try_claim_run(
            SYNC_JOB_NAME, now=now, min_interval=self._min_interval
        )
        if not claimed:
            retry_after = await self.state.seconds_until_next_run(
                SYNC_JOB_NAME, now=now, min_interval=self._min_interval
            )
            await self.db.rollback()
            logger.warning(f"Sync rechazado por rate limit, reintentar en {retry_after}s")
            raise SyncRateLimitException(max(1, retry_after))
        await self.db.commit()

    async def _finish_run(self, status: str, error: Optional[str]) -> None:
        await self.state.mark_run_finished(
            SYNC_JOB_NAME, status=status, error=error, finished_at=self._now()
        )
        await self.db.commit()

    async def get_status(self) -> SyncStatusDTO:
        """Estado de la ultima corrida, para el panel de administracion."""
        state = await self.state.get(SYNC_JOB_NAME)
        interval_s = int(self._min_interval.total_seconds())

        if state is None:
            return SyncStatusDTO(
                job_name=SYNC_JOB_NAME,
                status="never_run",
                min_interval_seconds=interval_s,
            )

        started = ensure_utc(state.last_run_started_at) if state.last_run_started_at else None
        return SyncStatusDTO(
            job_name=SYNC_JOB_NAME,
            status=state.last_run_status or "never_run",
            last_run_started_at=started,
            last_run_completed_at=(
                ensure_utc(state.last_run_completed_at) if state.last_run_completed_at else None
            ),
            last_run_error=state.last_run_error,
            next_run_available_at=started + self._min_interval if started else None,
            min_interval_seconds=interval_s,
        )


async def run_scheduled_sync() -> None:
    """
    Job del scheduler: abre su propia sesion y ejecuta una corrida.
    Los errores quedan en el log; el scheduler sigue vivo.
    """
    try:
        async with session_scope() as db:
            result = await ModelSyncUseCases(db).run_sync()
        logger.info(f"Sync programado: {result.updated}/{result.total} actualizados")
    except AppException as e:
        logger.warning(f"Sync programado no ejecutado: {e.error_code} - {e.message}")
    except Exception as e:
        logger.exception(f"Error inesperado en sync programado: {e}")
