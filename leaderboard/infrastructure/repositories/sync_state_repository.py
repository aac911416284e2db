"""
Repositorio del estado de los jobs de sync (tabla sync_state).

Implementa el rate limit del sync como un candado en base de datos:
reclamar la corrida es un UPDATE condicional sobre last_run_started_at,
asi dos instancias del API no pueden ejecutar el sync dentro del mismo
intervalo.
"""
import math
from datetime import datetime, timedelta
from typing import Optional

from loguru import logger
from sqlalchemy import or_, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from leaderboard.infrastructure.database.models import SyncStateModel
from leaderboard.shared.utils.datetime_utils import ensure_utc


class SyncStateRepository:
    """Gestiona la tabla sync_state."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, job_name: str) -> Optional[SyncStateModel]:
        # populate_existing: las escrituras van por UPDATE directo y el
        # identity map puede tener una copia vieja de la fila
        return await self.db.get(SyncStateModel, job_name, populate_existing=True)

    async def try_claim_run(
        self,
        job_name: str,
        *,
        now: datetime,
        min_interval: timedelta,
    ) -> bool:
        """
        Intenta reclamar una corrida del job.

        Retorna False si otra corrida empezo hace menos de min_interval.
        No hace commit: el caller debe confirmar la transaccion para que el
        reclamo sea visible a otras instancias. Si pierde la carrera por crear
        la fila, hace rollback de la transaccion en curso.
        """
        cutoff = now - min_interval

        result = await self.db.execute(
            update(SyncStateModel)
            .where(SyncStateModel.job_name == job_name)
            .where(
                or_(
                    SyncStateModel.last_run_started_at.is_(None),
                    SyncStateModel.last_run_started_at <= cutoff,
                )
            )
            .values(
                last_run_started_at=now,
                last_run_completed_at=None,
                last_run_status="running",
                last_run_error=None,
                updated_at=now,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 1:
            return True

        if await self.get(job_name) is not None:
            # La fila existe y la ultima corrida es reciente
            return False

        # Primera corrida del job: crear la fila. Si otra instancia la crea
        # al mismo tiempo, la PK hace fallar el INSERT y perdemos el reclamo.
        self.db.add(
            SyncStateModel(
                job_name=job_name,
                last_run_started_at=now,
                last_run_status="running",
                updated_at=now,
            )
        )
        try:
            await self.db.flush()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(f"Otra instancia reclamo el job '{job_name}' en paralelo")
            return False
        return True

    async def seconds_until_next_run(
        self,
        job_name: str,
        *,
        now: datetime,
        min_interval: timedelta,
    ) -> int:
        """Segundos que faltan para que el job pueda volver a correr."""
        state = await self.get(job_name)
        if state is None or state.last_run_started_at is None:
            return 0
        remaining = ensure_utc(state.last_run_started_at) + min_interval - now
        return max(0, math.ceil(remaining.total_seconds()))

    async def mark_run_finished(
        self,
        job_name: str,
        *,
        status: str,
        error: Optional[str],
        finished_at: datetime,
    ) -> None:
        await self.db.execute(
            update(SyncStateModel)
            .where(SyncStateModel.job_name == job_name)
            .values(
                last_run_completed_at=finished_at,
                last_run_status=status,
                last_run_error=error[:2000] if error else None,
                updated_at=finished_at,
            )
            .execution_options(synchronize_session=False)
        )
