"""
Modelos de base de datos (ORM).
"""
from sqlalchemy import Column, String, Integer, DateTime, Text, Float, JSON
from sqlalchemy.sql import func

from leaderboard.infrastructure.database.session import Base


class AIModelModel(Base):
    """
    Modelo de base de datos para los modelos del leaderboard.

    - source_id: identificador del proveedor; UNIQUE, es la llave del UPSERT.
      Es NULL para modelos cargados a mano desde el panel de administracion.
    - benchmark_scores: mapa de metricas opcionales. Una metrica sin valor
      no aparece como key.
    """

    __tablename__ = "ai_models"

    id = Column(Integer, primary_key=True, index=True)
    source_id = Column(String(255), nullable=True, unique=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    company = Column(String(100), nullable=False, index=True)
    overall_intelligence = Column(Float, nullable=False, index=True)
    benchmark_scores = Column(JSON, nullable=False, default=dict)
    description = Column(Text, nullable=True)
    last_updated = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<AIModel(id={self.id}, name={self.name}, source_id={self.source_id})>"


class SyncStateModel(Base):
    """
    Estado persistido por job de sync.

    last_run_started_at es el candado del rate limit: se reclama con un
    UPDATE condicional para que funcione con varias instancias del API.
    """

    __tablename__ = "sync_state"

    job_name = Column(String(100), primary_key=True)
    last_run_started_at = Column(DateTime(timezone=True), nullable=True)
    last_run_completed_at = Column(DateTime(timezone=True), nullable=True)
    last_run_status = Column(String(20), nullable=True)
    last_run_error = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<SyncState(job_name={self.job_name}, status={self.last_run_status})>"
