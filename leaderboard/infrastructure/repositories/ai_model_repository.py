"""
Repositorio de modelos del leaderboard.
Maneja las operaciones de base de datos para la entidad AIModelModel.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from leaderboard.infrastructure.database.models import AIModelModel
from leaderboard.shared.utils.datetime_utils import utc_now


# Criterios de orden soportados por el listado
SORT_COLUMNS = {
    "overall_intelligence": (AIModelModel.overall_intelligence.desc(),),
    "name": (AIModelModel.name.asc(),),
    "company": (AIModelModel.company.asc(), AIModelModel.name.asc()),
    "recent": (AIModelModel.last_updated.desc(),),
}
DEFAULT_SORT = "overall_intelligence"


class AIModelRepository:
    """Repositorio para gestionar modelos de IA en la base de datos."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def upsert_by_source_id(
        self,
        row: Dict[str, Any],
        *,
        synced_at: Optional[datetime] = None,
    ) -> None:
        """
        UPSERT por source_id (INSERT ... ON CONFLICT (source_id) DO UPDATE).

        Reemplaza todas las columnas que trae la fila ("last write wins").
        description no se toca: es un dato editorial que el proveedor no envia.
        No hace commit: el caller controla la transaccion.
        """
        if not row.get("source_id"):
            raise ValueError("Falta 'source_id' en row para UPSERT")

        values = dict(row)
        values["last_updated"] = synced_at or utc_now()

        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            from sqlalchemy.dialects.postgresql import insert
        elif dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            await self._upsert_generic(values)
            return

        stmt = insert(AIModelModel).values(**values)
        update_cols = {c: stmt.excluded[c] for c in values if c != "source_id"}
        stmt = stmt.on_conflict_do_update(
            index_elements=[AIModelModel.source_id],
            set_=update_cols,
        )
        await self.db.execute(stmt)

    async def _upsert_generic(self, values: Dict[str, Any]) -> None:
        """Fallback para dialectos sin ON CONFLICT: lectura y escritura."""
        existing = await self.get_by_source_id(values["source_id"])
        if existing is None:
            self.db.add(AIModelModel(**values))
        else:
            for column, value in values.items():
                setattr(existing, column, value)
        await self.db.flush()

    async def create(self, values: Dict[str, Any]) -> AIModelModel:
        """Inserta un modelo cargado manualmente."""
        model = AIModelModel(**values, last_updated=utc_now())
        self.db.add(model)
        await self.db.flush()
        await self.db.refresh(model)
        return model

    async def get_by_id(self, model_id: int) -> Optional[AIModelModel]:
        return await self.db.get(AIModelModel, model_id)

    async def get_by_source_id(self, source_id: str) -> Optional[AIModelModel]:
        result = await self.db.execute(
            select(AIModelModel).where(AIModelModel.source_id == source_id)
        )
        return result.scalars().first()

    async def get_all(self) -> List[AIModelModel]:
        """
        Obtiene todos los modelos ordenados por inteligencia.
        """
        result = await self.db.execute(
            select(AIModelModel).order_by(*SORT_COLUMNS[DEFAULT_SORT], AIModelModel.id)
        )
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.db.execute(select(func.count()).select_from(AIModelModel))
        return int(result.scalar_one())

    async def list_page(
        self,
        *,
        company: Optional[str] = None,
        sort: str = DEFAULT_SORT,
        offset: int = 0,
        limit: int = 25,
    ) -> Tuple[List[AIModelModel], int]:
        """
        Lista paginada con filtro opcional por compañia.

        Returns:
            Tuple de (modelos de la pagina, total que cumple el filtro)
        """
        query = select(AIModelModel)
        count_query = select(func.count()).select_from(AIModelModel)
        if company:
            query = query.where(AIModelModel.company == company)
            count_query = count_query.where(AIModelModel.company == company)

        order = SORT_COLUMNS.get(sort, SORT_COLUMNS[DEFAULT_SORT])
        query = query.order_by(*order, AIModelModel.id).offset(offset).limit(limit)

        result = await self.db.execute(query)
        total = await self.db.execute(count_query)
        return list(result.scalars().all()), int(total.scalar_one())
